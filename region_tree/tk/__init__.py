"""
tk
~~

`tkinter` based views.
"""
