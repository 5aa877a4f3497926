"""
util
~~~~

Various utility routines for working with `tkinter`.
"""

import tkinter as tk

NSEW = tk.N + tk.S + tk.E + tk.W

def screen_size(root):
    """Returns (width, height).

    :param root: A valid window object
    """
    return (root.winfo_screenwidth(), root.winfo_screenheight())

def centre_window(window, width=None, height=None):
    """Set the window to be of the given size, centred on the screen.

    :param width: Width to set the window to.  If `None` then use current
      window width.
    :param height: Height to set the window to.  If `None` then use current
      window height.
    """
    if width is None or height is None:
        window.update_idletasks()
        aw, ah = window.winfo_reqwidth(), window.winfo_reqheight()
        if width is None:
            width = aw
        if height is None:
            height = ah
    w, h = screen_size(window)
    x = max(0, (w - width) // 2)
    y = max(0, (h - height) // 2)
    window.geometry("{}x{}+{}+{}".format(width, height, x, y))

def is_descendant(widget, ancestor):
    """Is `widget` equal to, or contained in, `ancestor`?  Compares the Tk
    path names, so `widget` may be `None`."""
    if widget is None:
        return False
    path, root = str(widget), str(ancestor)
    return path == root or path.startswith(root.rstrip(".") + ".")

def widget_under_pointer(widget, event):
    """The widget below the pointer position of the event, or `None`."""
    try:
        return widget.winfo_containing(event.x_root, event.y_root)
    except (KeyError, tk.TclError):
        # Pointer over a window not created by tkinter
        return None
