"""BoardScene — QGraphicsScene that draws the board and pseudo-move highlights."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from chessfinder.core.board import Board
from chessfinder.core.move_generator import MoveGenerator
from chessfinder.core.types import (
    BOARD_SIZE,
    Coordinate,
    Square,
    as_coordinate,
    make_coordinate,
    square_name,
)
from chessfinder.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, pieces and pseudo-move highlights.

    Signals:
        square_selected(str): Emitted with the algebraic name of a selected
            piece's square after its pseudo-moves have been highlighted.
    """

    square_selected = pyqtSignal(str)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._flipped = False
        self._show_coordinates = True
        self._show_pseudo_moves = True

        self._selected: Coordinate | None = None
        self._pseudo_moves: set[Coordinate] = set()

        # Visual layers
        self._square_items: dict[Coordinate, QGraphicsRectItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[Coordinate, QGraphicsSimpleTextItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board) -> None:
        """Update the displayed board (full redraw of pieces)."""
        self._board = board
        self.clear_selection()
        self._sync_pieces()

    @property
    def board(self) -> Board | None:
        return self._board

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._redraw()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._redraw()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_pseudo_moves(self, visible: bool) -> None:
        """Show or hide pseudo-move highlights."""
        self._show_pseudo_moves = visible
        if self._selected is not None:
            self._draw_highlights()

    @property
    def selected_square(self) -> str | None:
        return None if self._selected is None else square_name(self._selected)

    @property
    def pseudo_moves(self) -> set[Coordinate]:
        """Pseudo-moves of the selected piece (empty when nothing is selected)."""
        return set(self._pseudo_moves)

    @property
    def highlighted_squares(self) -> set[str]:
        """Names of the squares currently carrying a highlight overlay."""
        names: set[str] = set()
        for item in self._highlight_items:
            coord = self._pos_to_coordinate(item.rect().center())
            if coord is not None:
                names.add(square_name(coord))
        return names

    def select_square(self, square: Square) -> bool:
        """Select the piece on *square* and highlight its pseudo-moves.

        Returns ``False`` (and clears any selection) when the square is empty.
        """
        self.clear_selection()
        if self._board is None:
            return False
        coord = as_coordinate(square)
        placed = self._board.locate(coord)
        if placed is None:
            return False

        self._selected = coord
        self._pseudo_moves = MoveGenerator(self._board).pseudo_moves_for(placed)
        self._draw_highlights()
        self.square_selected.emit(square_name(coord))
        return True

    def clear_selection(self) -> None:
        self._selected = None
        self._pseudo_moves = set()
        self._clear_highlights()

    # ── Board drawing ────────────────────────────────────────────────────

    def _redraw(self) -> None:
        self._draw_board()
        self._sync_pieces()
        if self._selected is not None:
            self._draw_highlights()

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Sans Serif", max(9, t // 8))

        for rank in range(BOARD_SIZE):
            for file in range(BOARD_SIZE):
                coord = make_coordinate(file, rank)
                col, row = self._visual_coords(coord)
                is_light = (file + rank) % 2 == 0
                color = self._theme.light_square if is_light else self._theme.dark_square
                rect = QGraphicsRectItem(col * t, row * t, t, t)
                rect.setBrush(QBrush(color))
                rect.setPen(QPen(Qt.PenStyle.NoPen))
                rect.setZValue(0)
                self.addItem(rect)
                self._square_items[coord] = rect

                text_color = self._theme.coord_dark if is_light else self._theme.coord_light
                name = square_name(coord)

                # Rank numbers (left edge)
                if col == 0:
                    self._add_coord_label(name[1], col * t + 2, row * t + 1, font, text_color)

                # File letters (bottom edge)
                if row == BOARD_SIZE - 1:
                    self._add_coord_label(
                        name[0], col * t + t - 12, row * t + t - 16, font, text_color
                    )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord_label(
        self, label: str, x: float, y: float, font: QFont, color: QColor
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece glyphs from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._board is None:
            return

        t = self.TILE
        font = QFont("Sans Serif", int(t * 0.6))
        for placed in self._board.all_pieces():
            item = QGraphicsSimpleTextItem(placed.piece.symbol)
            item.setFont(font)
            item.setBrush(QBrush(self._theme.piece_glyph))
            col, row = self._visual_coords(placed.coordinate)
            bounds = item.boundingRect()
            item.setPos(
                col * t + (t - bounds.width()) / 2,
                row * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[placed.coordinate] = item

    # ── Highlights ───────────────────────────────────────────────────────

    def _draw_highlights(self) -> None:
        self._clear_highlights()
        if self._selected is None or self._board is None:
            return

        self._highlight_items.append(
            self._make_highlight(self._selected, self._theme.highlight_from)
        )
        if not self._show_pseudo_moves:
            return
        for coord in sorted(self._pseudo_moves):
            color = (
                self._theme.highlight_capture
                if self._board.is_occupied(coord)
                else self._theme.highlight_to
            )
            self._highlight_items.append(self._make_highlight(coord, color))

    def _clear_highlights(self) -> None:
        for item in self._highlight_items:
            self.removeItem(item)
        self._highlight_items.clear()

    def _make_highlight(self, coord: Coordinate, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        col, row = self._visual_coords(coord)
        rect = QGraphicsRectItem(col * t, row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if self._board is None or event is None:
            return super().mousePressEvent(event)

        coord = self._pos_to_coordinate(event.scenePos())
        if coord is None or not self.select_square(coord):
            self.clear_selection()
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, coord: Coordinate) -> tuple[int, int]:
        """Board coordinate → visual column/row."""
        if self._flipped:
            return BOARD_SIZE - 1 - coord.file, BOARD_SIZE - 1 - coord.rank
        return coord.file, coord.rank

    def _pos_to_coordinate(self, pos: QPointF) -> Coordinate | None:
        """Scene position → board coordinate."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        if self._flipped:
            return make_coordinate(BOARD_SIZE - 1 - col, BOARD_SIZE - 1 - row)
        return make_coordinate(col, row)
