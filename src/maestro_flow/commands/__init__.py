"""Command emitters.

Each function validates its input and returns the rendered lines for one
command. Nothing here touches a buffer; the builder appends what it gets back.
"""
