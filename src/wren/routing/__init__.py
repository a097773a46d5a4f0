"""Routing: path templates and the immutable route table.

Page specs are compiled into a :class:`~wren.routing.table.RouteTable`
before anything renders; templates use it for reverse lookup.
"""
