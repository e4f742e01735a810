"""Shared fixtures: a manual timer host and a recording canvas."""

import pytest


class FakeScheduler:
    """Stands in for a Tk widget's after/after_cancel pair.

    Callbacks only run when the test fires them.
    """

    def __init__(self):
        self.pending = {}
        self.cancelled = []
        self.delays = []
        self._next_id = 0

    def after(self, ms, func):
        self._next_id += 1
        handle = f"after#{self._next_id}"
        self.pending[handle] = func
        self.delays.append(ms)
        return handle

    def after_cancel(self, handle):
        self.cancelled.append(handle)
        self.pending.pop(handle, None)

    def fire_next(self):
        """Runs the oldest pending callback."""
        handle = next(iter(self.pending))
        func = self.pending.pop(handle)
        func()

    def tick(self, n=1):
        for _ in range(n):
            self.fire_next()


class FakeCanvas:
    """Records create_* calls made by the renderer."""

    def __init__(self):
        self.items = []

    def delete(self, tag):
        if tag == "all":
            self.items.clear()

    def _create(self, kind, *coords, **options):
        tags = options.get("tags", ())
        if isinstance(tags, str):
            tags = (tags,)
        self.items.append({'kind': kind, 'coords': coords, 'options': options, 'tags': tuple(tags)})
        return len(self.items)

    def create_rectangle(self, *coords, **options):
        return self._create("rectangle", *coords, **options)

    def create_line(self, *coords, **options):
        return self._create("line", *coords, **options)

    def create_text(self, *coords, **options):
        return self._create("text", *coords, **options)

    def create_oval(self, *coords, **options):
        return self._create("oval", *coords, **options)

    def create_arc(self, *coords, **options):
        return self._create("arc", *coords, **options)

    def tagged(self, tag):
        return [item for item in self.items if tag in item['tags']]


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def canvas():
    return FakeCanvas()
