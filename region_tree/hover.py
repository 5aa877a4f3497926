"""
hover
~~~~~

Show / hide logic for a pop-out container (a region whose children are laid
out as `block`).

The container is shown while the pointer is over the region's label.  Once
the pointer leaves, we wait a short delay before hiding, so the pointer can
travel from the label into the container; being over either the label or the
container keeps the container open.

Timers are run by a "scheduler", any object with the `tkinter` style methods
`after(ms, func)` returning an id, and `after_cancel(id)`.
"""

class HoverTarget():
    """One widget we monitor: tracks if the pointer is over it, and at most
    one pending "leave" timer.

    :param scheduler: Object with `after` and `after_cancel` methods.
    """
    def __init__(self, scheduler):
        self._scheduler = scheduler
        self._timer = None
        self.is_hover = False

    def enter(self):
        self.is_hover = True
        self.cancel()

    def leave(self, delay, task):
        """Schedule `task` after the delay, replacing any pending task."""
        self.cancel()
        def later():
            self._timer = None
            self.is_hover = False
            task()
        self._timer = self._scheduler.after(delay, later)

    def cancel(self):
        timer = self._timer
        self._timer = None
        if timer is not None:
            self._scheduler.after_cancel(timer)

    @property
    def pending(self):
        """Is a leave task waiting to run?"""
        return self._timer is not None


class BlockHover():
    """Couples the label and container of one pop-out.

    :param scheduler: Object with `after` and `after_cancel` methods.
    :param delay: Milliseconds to wait after the pointer leaves.
    :param show: Callable with no arguments, which shows the container.
    :param hide: Callable with no arguments, which hides the container.
    """
    def __init__(self, scheduler, delay, show, hide):
        self._delay = delay
        self._show = show
        self._hide = hide
        self.label = HoverTarget(scheduler)
        self.container = HoverTarget(scheduler)
        self._shown = False

    @property
    def shown(self):
        return self._shown

    def enter_label(self, event=None):
        self.label.enter()
        if not self._shown:
            self._shown = True
            self._show()

    def leave_label(self, event=None):
        self.label.leave(self._delay, self._maybe_hide)

    def enter_container(self, event=None):
        self.container.enter()

    def leave_container(self, event=None):
        self.container.leave(self._delay, self._maybe_hide)

    def _maybe_hide(self):
        if self.label.is_hover or self.container.is_hover:
            return
        if self._shown:
            self._shown = False
            self._hide()

    def cancel(self):
        """Drop any pending timers, e.g. before the widgets are destroyed."""
        self.label.cancel()
        self.container.cancel()
