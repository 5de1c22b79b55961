from __future__ import annotations

from typing import Iterable, Optional

BLACK = -1
WHITE = 1
EMPTY = 0

# Offsets on the flat index, combined with edge checks in `step()`.
DIRECTIONS = [-9, -8, -7, -1, 1, 7, 8, 9]

CORNERS = {0, 7, 56, 63}


class OutOfRange(ValueError):
    pass


def opponent(color: int) -> int:
    assert color in [BLACK, WHITE]
    return -color


def check_index(index: int) -> None:
    if index not in range(64):
        raise OutOfRange(f"Index {index} is not on the board")


def step(index: int, direction: int) -> Optional[int]:
    """
    Returns the neighbour of `index` in `direction`,
    or None if the step would leave the board or wrap around a side edge.
    """
    col = index % 8

    if col == 0 and direction in [-9, -1, 7]:
        return None

    if col == 7 and direction in [-7, 1, 9]:
        return None

    neighbour = index + direction
    if neighbour not in range(64):
        return None

    return neighbour


def is_corner(index: int) -> bool:
    return index in CORNERS


def is_edge(index: int) -> bool:
    """Outer ring of the board, corners excluded."""
    row, col = divmod(index, 8)
    on_ring = row in [0, 7] or col in [0, 7]
    return on_ring and not is_corner(index)


class Board:
    def __init__(self, squares: list[int]) -> None:
        assert len(squares) == 64
        self.squares = squares

    @classmethod
    def start(cls) -> Board:
        board = Board.empty()
        board.squares[27] = WHITE
        board.squares[28] = BLACK
        board.squares[35] = BLACK
        board.squares[36] = WHITE
        return board

    @classmethod
    def empty(cls) -> Board:
        return Board([EMPTY] * 64)

    @classmethod
    def from_squares(cls, squares: list[int]) -> Board:
        if len(squares) != 64:
            raise ValueError(f"Expected 64 squares, got {len(squares)}")

        for square in squares:
            if square not in [BLACK, WHITE, EMPTY]:
                raise ValueError(f'Unknown square value "{square}"')

        return Board(list(squares))

    @classmethod
    def from_string(cls, string: str) -> Board:
        """
        Parses a board from 64 characters, `X` for black, `O` for white and `-` for empty.
        Whitespace is ignored, so boards can be written as 8 lines of 8 characters.
        """
        chars = "".join(string.split())
        values = {"X": BLACK, "O": WHITE, "-": EMPTY}

        try:
            squares = [values[char] for char in chars.upper()]
        except KeyError as e:
            raise ValueError(f"Invalid board character {e}")

        return Board.from_squares(squares)

    def copy(self) -> Board:
        return Board(list(self.squares))

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"

    def to_string(self) -> str:
        chars = {BLACK: "X", WHITE: "O", EMPTY: "-"}
        return "".join(chars[square] for square in self.squares)

    def as_tuple(self) -> tuple[int, ...]:
        return tuple(self.squares)

    def __hash__(self) -> int:  # pragma: nocover
        return hash(self.as_tuple())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.as_tuple() == other.as_tuple()

    def get_square(self, index: int) -> int:
        check_index(index)
        return self.squares[index]

    def set_square(self, index: int, value: int) -> None:
        check_index(index)
        assert value in [BLACK, WHITE, EMPTY]
        self.squares[index] = value

    def count(self, color: int) -> int:
        assert color in [BLACK, WHITE]
        return self.squares.count(color)

    def count_discs(self) -> int:
        return 64 - self.count_empties()

    def count_empties(self) -> int:
        return self.squares.count(EMPTY)

    def is_full(self) -> bool:
        return self.count_empties() == 0

    def get_flips(self, index: int, color: int, direction: int) -> list[int]:
        """
        Returns the opponent discs that placing `color` on `index` would flip in `direction`.
        The list is empty when that direction has no capture.
        """
        check_index(index)

        if direction not in DIRECTIONS:
            raise ValueError(f"Unknown direction {direction}")

        opp = opponent(color)
        run: list[int] = []

        current = step(index, direction)
        while current is not None and self.squares[current] == opp:
            run.append(current)
            current = step(current, direction)

        if current is None or self.squares[current] != color:
            return []

        return run

    def get_all_flips(self, index: int, color: int) -> list[int]:
        flips: list[int] = []
        for direction in DIRECTIONS:
            flips += self.get_flips(index, color, direction)
        return flips

    def is_valid_move(self, index: int, color: int) -> bool:
        if self.get_square(index) != EMPTY:
            return False

        return any(self.get_flips(index, color, direction) for direction in DIRECTIONS)

    def get_moves_as_set(self, color: int) -> set[int]:
        return {index for index in range(64) if self.is_valid_move(index, color)}

    def show(self, moves: Optional[set[int]] = None) -> None:
        if moves is None:
            moves = set()

        print("+-a-b-c-d-e-f-g-h-+")
        for y in range(8):
            print("{} ".format(y + 1), end="")

            for x in range(8):
                index = (y * 8) + x
                square = self.squares[index]

                if square == BLACK:
                    print("○ ", end="")
                elif square == WHITE:
                    print("● ", end="")
                elif index in moves:
                    print("· ", end="")
                else:
                    print("  ", end="")
            print("|")
        print("+-----------------+")

    @classmethod
    def index_to_field(cls, index: int) -> str:
        check_index(index)
        return "abcdefgh"[index % 8] + "12345678"[index // 8]

    @classmethod
    def indexes_to_fields(cls, indexes: Iterable[int]) -> str:
        return " ".join(cls.index_to_field(index) for index in indexes)

    @classmethod
    def field_to_index(cls, field: str) -> int:
        if len(field) != 2:
            raise ValueError(f'Invalid move length "{len(field)}"')

        field = field.lower()

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        x = ord(field[0]) - ord("a")
        y = ord(field[1]) - ord("1")
        return y * 8 + x
