from __future__ import annotations

from typing import List, Sequence

import arcade
from pyglet.window import key as pygkey

from maze_racer.agents.base import SearchResult
from maze_racer.engine.maze import Maze

# Cell colors (RGBA)
FREE_COLOR = (200, 200, 190, 255)
BARRIER_COLOR = (45, 45, 55, 255)
START_COLOR = (60, 160, 255, 255)
DESTINATION_COLOR = (230, 70, 60, 255)
PATH_COLOR = (255, 200, 0, 170)


class MazeWindow(arcade.Window):
    """Arcade window showing a maze and the path of one search result at a time.

    TAB cycles through the results, ESC closes the window. Row 0 of the maze
    is drawn at the top.
    """

    def __init__(self, maze: Maze, results: Sequence[SearchResult], cell_size: int = 32):
        super().__init__(
            width=max(1, maze.column_count) * cell_size,
            height=max(1, maze.row_count) * cell_size + 28,
            title=f"Maze Racer - {maze.name}",
            resizable=False,
        )
        arcade.set_background_color(arcade.color.BLACK)
        self.maze = maze
        self.results: List[SearchResult] = list(results)
        self.cell_size = cell_size
        self.selected = 0
        self._label = arcade.Text("", 8, self.height - 20, arcade.color.WHITE, 12)
        self._hint = arcade.Text("TAB: next agent  |  ESC: quit", 8, self.height - 20, arcade.color.LIGHT_GRAY, 10,
                                 anchor_x="right")
        self._hint.x = self.width - 8
        self._update_label()

    def _cell_lrbt(self, index: int):
        cs = self.cell_size
        row, column = self.maze.coordinates(index)
        left = column * cs
        bottom = (self.maze.row_count - 1 - row) * cs
        return left, left + cs, bottom, bottom + cs

    def _cell_color(self, index: int):
        if index == self.maze.start_index:
            return START_COLOR
        if index == self.maze.destination_index:
            return DESTINATION_COLOR
        return FREE_COLOR if self.maze.free_mask[index] else BARRIER_COLOR

    def _update_label(self) -> None:
        if not self.results:
            self._label.text = "no results"
            return
        r = self.results[self.selected]
        outcome = f"{r.length} moves" if r.completed else "no path found"
        self._label.text = f"{r.agent}: {outcome}, {r.nodes_explored} nodes explored"

    def on_draw(self):
        self.clear()
        # Grid first, path on top
        for index in range(self.maze.size):
            left, right, bottom, top = self._cell_lrbt(index)
            arcade.draw_lrbt_rectangle_filled(left + 1, right - 1, bottom + 1, top - 1, self._cell_color(index))
        if self.results:
            result = self.results[self.selected]
            if result.completed:
                for index in result.path[1:-1]:
                    left, right, bottom, top = self._cell_lrbt(index)
                    inset = self.cell_size // 4
                    arcade.draw_lrbt_rectangle_filled(left + inset, right - inset, bottom + inset, top - inset, PATH_COLOR)
        self._label.draw()
        self._hint.draw()

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == pygkey.TAB and self.results:
            self.selected = (self.selected + 1) % len(self.results)
            self._update_label()
        elif symbol == pygkey.ESCAPE:
            self.close()


def show_results(maze: Maze, results: Sequence[SearchResult], cell_size: int = 32) -> None:
    MazeWindow(maze, results, cell_size=cell_size)
    arcade.run()
