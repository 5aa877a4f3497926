"""
icons
~~~~~

Check box images, one per selection state, drawn with `Pillow` so that we do
not depend on the look of the current `ttk` theme.
"""

import PIL.Image as _image
import PIL.ImageDraw as _draw
import PIL.ImageTk as _imagetk

from region_tree.selection import State

BORDER = (0x70, 0x70, 0x70, 0xff)
BACKGROUND = (0xff, 0xff, 0xff, 0xff)
MARK = (0x1f, 0x6f, 0xd0, 0xff)

def checkbox_image(state, size=14):
    """Draw a check box.

    :param state: A :class:`region_tree.selection.State` (or its value).
    :param size: Width and height in pixels.

    :return: An RGBA `PIL.Image.Image`.
    """
    state = State(state)
    if size < 8:
        raise ValueError("Check box size must be at least 8 pixels")
    image = _image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = _draw.Draw(image)
    last = size - 1
    draw.rectangle([0, 0, last, last], fill=BACKGROUND, outline=BORDER)
    if state == State.CHECKED:
        draw.line([(3, size // 2), (size * 2 // 5, last - 3), (last - 2, 3)],
            fill=MARK, width=2)
    elif state == State.HALF_CHECKED:
        draw.rectangle([3, 3, last - 3, last - 3], fill=MARK)
    return image


class CheckBoxIcons():
    """`ImageTk.PhotoImage` instances for each state.  We hold the
    references, as `tkinter` does not.

    :param master: The widget the images belong to.
    :param size: Width and height in pixels.
    """
    def __init__(self, master=None, size=14):
        self._images = { state : _imagetk.PhotoImage(checkbox_image(state, size), master=master)
            for state in State }

    def __getitem__(self, state):
        return self._images[State(state)]
