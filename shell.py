"""
Line based command shell around a PointSet.

Each input line holds one command and its parameters separated by
whitespace, e.g. `add 3 -4`. Results go to the output stream, problems
are reported as `Error! ...` lines and never end the session.
"""

import logging
import re
import sys

from dataclasses import dataclass, field
from typing import Callable, TextIO

from config import ShellConfig
from geometry import Point
from point_set import PointSet
from visualization import plot_point_set

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r'[+-]?\d+', re.ASCII)

HELP_TEXT = """\
Commands:
  add X Y      add the point (X, Y), X and Y are integers
  remove X Y   remove the point (X, Y)
  print        show all points sorted by x, then y
  convex       show the convex hull counter-clockwise
  new          discard all points and start over
  plot [FILE]  save a picture of the points and their hull
  help         show this text
  quit         exit the program"""


class ShellError(Exception):
    """Invalid command or parameters typed by the user."""


@dataclass
class Session:
    point_set: PointSet = field(default_factory=PointSet)
    running: bool = True


def format_points(points: list[Point]) -> str:
    return '[' + ', '.join(str(p) for p in points) + ']'


def parse_int(value: str) -> int:
    # int() alone would also take "1_000" and non-ASCII digits
    if not INTEGER_PATTERN.fullmatch(value):
        raise ShellError(f'The value "{value}" has to be an integer.')
    return int(value)


def parse_point(args: list[str]) -> Point:
    if len(args) != 2:
        raise ShellError(f'Expected 2 coordinates, got {len(args)}.')
    return Point(parse_int(args[0]), parse_int(args[1]))


class Shell:
    def __init__(self, config: ShellConfig | None = None, out: TextIO = sys.stdout):
        self.config = config or ShellConfig()
        self.out = out
        self.session = Session()

        self.commands: dict[str, Callable[[list[str]], None]] = {
            'add': self.cmd_add,
            'remove': self.cmd_remove,
            'print': self.cmd_print,
            'convex': self.cmd_convex,
            'new': self.cmd_new,
            'plot': self.cmd_plot,
            'help': self.cmd_help,
            'quit': self.cmd_quit,
        }

    def write(self, text: str):
        print(text, file=self.out)

    def print_error(self, msg: str):
        self.write(f'Error! {msg}')
        self.write("Enter 'help' to display the syntax.")

    def run(self, stdin: TextIO):
        """
        Process lines from stdin until `quit` or end of input.
        """
        while self.session.running:
            if self.config.show_prompt:
                self.out.write(self.config.prompt)
                self.out.flush()
            line = stdin.readline()
            if not line:
                # EOF
                self.session.running = False
                break
            self.process_line(line)

    def process_line(self, line: str):
        tokens = line.split()
        if not tokens:
            return
        try:
            self.execute(tokens[0].lower(), tokens[1:])
        except ShellError as e:
            logger.info('Rejected input %r: %s', line.strip(), e)
            self.print_error(str(e))

    def execute(self, cmd: str, args: list[str]):
        handler = self.commands.get(cmd)
        if handler is None:
            raise ShellError(f'Unknown command "{cmd}".')
        logger.debug('Executing %s %s', cmd, args)
        handler(args)

    @staticmethod
    def expect_no_args(cmd: str, args: list[str]):
        if args:
            raise ShellError(f'Command "{cmd}" takes no parameters.')

    def cmd_add(self, args: list[str]):
        p = parse_point(args)
        if not self.session.point_set.add(p):
            raise ShellError(f'Point {p} is already in the set.')

    def cmd_remove(self, args: list[str]):
        p = parse_point(args)
        if not self.session.point_set.remove(p):
            raise ShellError(f'Point {p} is not in the set.')

    def cmd_print(self, args: list[str]):
        self.expect_no_args('print', args)
        self.write(format_points(self.session.point_set.sorted_view()))

    def cmd_convex(self, args: list[str]):
        self.expect_no_args('convex', args)
        self.write(format_points(self.session.point_set.convex_hull()))

    def cmd_new(self, args: list[str]):
        self.expect_no_args('new', args)
        self.session.point_set = PointSet()

    def cmd_plot(self, args: list[str]):
        if len(args) > 1:
            raise ShellError('Command "plot" takes at most one file name.')
        path = args[0] if args else self.config.plot_file
        point_set = self.session.point_set
        try:
            plot_point_set(point_set.sorted_view(), point_set.convex_hull(), path)
        except OSError as e:
            raise ShellError(f'Cannot write plot to {path}: {e}') from e
        self.write(f'Plot saved to {path}')

    def cmd_help(self, args: list[str]):
        self.expect_no_args('help', args)
        self.write(HELP_TEXT)

    def cmd_quit(self, args: list[str]):
        self.expect_no_args('quit', args)
        self.session.running = False
