"""A dungeon grid where entities wander, meet and disappear."""

from __future__ import annotations

import io
import random
import subprocess
import sys
import time
from collections import deque

from labworks.entities import Character, Trap

WIDTH = 50
HEIGHT = 10
_MAX_LOGS = 2


def fill_grid(entities, width, height):
    """Return a ``height`` by ``width`` grid of cells listing the entities in them.

    Entities outside the grid are left out.
    """
    grid = [[[] for _ in range(width)] for _ in range(height)]
    for entity in entities:
        if 0 <= entity.y < height and 0 <= entity.x < width:
            grid[entity.y][entity.x].append(entity)
    return grid


def render(grid, logs):
    """Draw the grid in a frame, followed by the log lines padded to two lines."""
    width = len(grid[0]) if grid else 0
    border = "#" * (width + 2)
    lines = [border]
    for row in grid:
        drawn = "".join(cell[0].representation() if cell else " " for cell in row)
        lines.append(f"|{drawn}|")
    lines.append(border)
    text = "\n".join(lines) + "\n"
    text += "".join(f"{log}\n" for log in logs)
    text += "\n" * max(0, _MAX_LOGS - len(logs))
    return text


def trigger_interactions(cell):
    """Let the first two entities of a cell act on each other."""
    if len(cell) > 1:
        cell[0].interact_with(cell[1])
        cell[1].interact_with(cell[0])


def remove_dead_entities(entities):
    """Remove, in place, every entity that asks to be destroyed; return them."""
    removed = [entity for entity in entities if entity.should_destroy()]
    entities[:] = [entity for entity in entities if not entity.should_destroy()]
    for entity in removed:
        entity._on_removed()
    return removed


def collect_logs(logs, lines):
    """Append the non-empty ``lines`` to ``logs`` and keep only the latest two."""
    logs.extend(line for line in lines if line)
    while len(logs) > _MAX_LOGS:
        logs.popleft() if isinstance(logs, deque) else logs.pop(0)
    return logs


class Dungeon:
    """The entities, their grid, and the messages they produce."""

    def __init__(self, entities, width=WIDTH, height=HEIGHT):
        self.entities = list(entities)
        self.width = width
        self.height = height
        self.logs = deque()
        self._logger = io.StringIO()
        for entity in self.entities:
            entity.out = self._logger
        self.grid = fill_grid(self.entities, width, height)

    def update(self):
        """Move everyone, resolve meetings, and drop the dead."""
        for entity in self.entities:
            entity.update()
        self.grid = fill_grid(self.entities, self.width, self.height)
        for row in self.grid:
            for cell in row:
                trigger_interactions(cell)
        remove_dead_entities(self.entities)
        self.grid = fill_grid(self.entities, self.width, self.height)

    def frame(self):
        """Gather the new messages and return the current picture."""
        lines = self._logger.getvalue().splitlines()
        self._logger.seek(0)
        self._logger.truncate(0)
        collect_logs(self.logs, lines)
        return render(self.grid, self.logs)


def _clear_screen():
    try:
        if sys.platform.startswith("win"):
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


def main(argv=None):
    """Run the dungeon, one step a second, optionally for a given number of steps."""
    if argv is None:
        argv = sys.argv[1:]
    steps = int(argv[0]) if argv else None
    rng = random.Random()
    entities = [
        Character(3, 2, rng),
        Character(7, 6, rng),
        Character(40, 5, rng),
        Trap(WIDTH, HEIGHT, rng),
        Trap(WIDTH, HEIGHT, rng),
    ]
    dungeon = Dungeon(entities, WIDTH, HEIGHT)
    done = 0
    while True:
        picture = dungeon.frame()
        _clear_screen()
        print(picture)
        if steps is not None and done >= steps:
            break
        time.sleep(1)
        dungeon.update()
        done += 1
    return 0


if __name__ == "__main__":
    sys.exit(main())