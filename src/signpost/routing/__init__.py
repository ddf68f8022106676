"""Routing: typed templates, ordered matching, and alias resolution.

Templates are built with ``TemplateFactory`` (or parsed from ``":name"``
strings) and registered with a ``Router``, which tries them newest-first.
"""
