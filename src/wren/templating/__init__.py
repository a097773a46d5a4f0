"""Templating: the renderer boundary and its kida implementation."""
