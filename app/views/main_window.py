"""Main window: page navigation, home/about copy, portfolio grid and the lightbox host."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QSize, Qt
from PySide6.QtGui import QIcon, QPixmap
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QStackedWidget,
    QToolButton,
    QVBoxLayout,
    QWidget,
)
from loguru import logger

from app.viewmodels.main_vm import MainVM
from app.viewmodels.portfolio_vm import PortfolioCardVM
from app.views.card_slider import CardSlider
from app.views.constants import (
    CARD_THUMB_PX,
    CARD_TITLE_STYLE,
    GRID_COLUMNS,
    GRID_SPACING_PX,
    HERO_TITLE_STYLE,
    NAV_PAGES,
    QUOTE_STYLE,
    SECTION_TITLE_STYLE,
    WINDOW_DEFAULT_SIZE,
)
from app.views.lightbox_dialog import LightboxDialog
from app.views.qt_effects import QtKeyEventHost, QtScrollTarget
from core.models import TextCard
from core.services.router import ABOUT, HOME, PORTFOLIO


class MainWindow(QMainWindow):
    """Top-level window hosting the three site pages."""

    def __init__(self, vm: MainVM) -> None:
        super().__init__()
        self._vm = vm
        self._nav_buttons: dict[str, QPushButton] = {}
        self._page_index: dict[str, int] = {}

        self._setup_ui()

        # Effects can only be bound once the scroll area exists
        self._key_host = QtKeyEventHost()
        self._vm.session.bind_effects(
            scroll_target=QtScrollTarget(self._portfolio_scroll), key_host=self._key_host
        )
        self._lightbox = LightboxDialog(vm.lightbox, self)

        self.resize(*WINDOW_DEFAULT_SIZE)
        self._sync_page()

    def _setup_ui(self) -> None:
        central = QWidget()
        root = QVBoxLayout(central)

        nav = QHBoxLayout()
        for page, label in NAV_PAGES:
            btn = QPushButton(label)
            btn.setCheckable(True)
            btn.clicked.connect(lambda _checked=False, p=page: self.navigate(p))
            nav.addWidget(btn)
            self._nav_buttons[page] = btn
        nav.addStretch()
        root.addLayout(nav)

        self._stack = QStackedWidget()
        self._page_index[HOME] = self._stack.addWidget(self._build_home_page())
        self._page_index[ABOUT] = self._stack.addWidget(self._build_about_page())
        self._page_index[PORTFOLIO] = self._stack.addWidget(self._build_portfolio_page())
        root.addWidget(self._stack, 1)

        self.setCentralWidget(central)

    def _build_home_page(self) -> QWidget:
        home = self._vm.homepage
        page = QWidget()
        layout = QVBoxLayout(page)

        hero = QHBoxLayout()
        intro = QVBoxLayout()
        intro.addWidget(_heading(home.hero_title, HERO_TITLE_STYLE))
        intro.addWidget(_paragraph(home.hero_subtitle))
        intro.addWidget(_paragraph(home.hero_description))
        cta = QPushButton(home.hero_cta)
        cta.setAccessibleName("Navigate to portfolio page to view makeup artistry work")
        cta.clicked.connect(lambda: self.navigate(PORTFOLIO))
        intro.addWidget(cta, 0, Qt.AlignLeft)
        intro.addStretch()
        hero.addLayout(intro, 1)
        slider = CardSlider(self._vm.hero_slider)
        slider.activated.connect(lambda _index, s=slider: self.open_hero_gallery(s))
        hero.addWidget(slider)
        layout.addLayout(hero)

        if home.philosophy_cards:
            layout.addWidget(_heading(home.philosophy_title, SECTION_TITLE_STYLE))
            layout.addLayout(_card_row(home.philosophy_cards))

        layout.addWidget(_heading(home.featured_title, SECTION_TITLE_STYLE))
        if home.featured_description:
            layout.addWidget(_paragraph(home.featured_description))
        grid = QGridLayout()
        grid.setSpacing(GRID_SPACING_PX)
        self._fill_grid(grid, self._vm.featured_cards)
        layout.addLayout(grid)
        view_all = QPushButton("View Portfolio")
        view_all.clicked.connect(lambda: self.navigate(PORTFOLIO))
        layout.addWidget(view_all, 0, Qt.AlignCenter)
        layout.addStretch()
        return _scrollable(page)

    def _build_about_page(self) -> QWidget:
        about = self._vm.about
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.addWidget(_heading(about.hero_title, HERO_TITLE_STYLE))
        layout.addWidget(_paragraph(about.hero_subtitle))
        if about.hero_description:
            layout.addWidget(_paragraph(about.hero_description))

        if about.journey_sections:
            layout.addWidget(_heading(about.journey_title, SECTION_TITLE_STYLE))
            layout.addLayout(_card_row(about.journey_sections))

        layout.addWidget(_heading(about.services_title, SECTION_TITLE_STYLE))
        if about.services_description:
            layout.addWidget(_paragraph(about.services_description))
        if about.services:
            layout.addLayout(_card_row(about.services))
        see_nails = QPushButton("See Fusion Nails")
        see_nails.clicked.connect(lambda: self.navigate(PORTFOLIO, "fusion-nails"))
        layout.addWidget(see_nails, 0, Qt.AlignLeft)

        if about.philosophy_content or about.philosophy_quote:
            layout.addWidget(_heading(about.philosophy_title, SECTION_TITLE_STYLE))
            if about.philosophy_content:
                layout.addWidget(_paragraph(about.philosophy_content))
            if about.philosophy_quote:
                quote = _paragraph(f"“{about.philosophy_quote}”")
                quote.setStyleSheet(QUOTE_STYLE)
                layout.addWidget(quote)
        layout.addStretch()
        return _scrollable(page)

    def _build_portfolio_page(self) -> QWidget:
        self._portfolio_scroll = QScrollArea()
        self._portfolio_scroll.setWidgetResizable(True)
        container = QWidget()
        grid = QGridLayout(container)
        grid.setSpacing(GRID_SPACING_PX)
        self._fill_grid(grid, self._vm.cards)
        self._portfolio_scroll.setWidget(container)
        return self._portfolio_scroll

    def _fill_grid(self, grid: QGridLayout, cards: list[PortfolioCardVM]) -> None:
        for pos, card in enumerate(cards):
            row, col = divmod(pos, GRID_COLUMNS)
            grid.addWidget(self._build_card(card), row, col)

    def _build_card(self, card: PortfolioCardVM) -> QToolButton:
        btn = QToolButton()
        btn.setText(f"{card.title}\n{card.category}")
        btn.setToolButtonStyle(Qt.ToolButtonTextUnderIcon)
        btn.setAccessibleName(card.accessible_label)
        btn.setToolTip(card.accessible_label)
        btn.setProperty("entry_id", card.entry_id)
        cover = card.cover_image
        if cover is not None and Path(cover.source).exists():
            pm = QPixmap(cover.source)
            if not pm.isNull():
                btn.setIcon(QIcon(pm))
                btn.setIconSize(QSize(CARD_THUMB_PX, CARD_THUMB_PX))
        btn.clicked.connect(
            lambda _checked=False, b=btn, eid=card.entry_id: self.open_entry(eid, b)
        )
        return btn

    # Public API
    def navigate(self, page: str, section: str | None = None) -> None:
        self._vm.navigate(page, section)
        self._sync_page()

    def open_entry(self, entry_id: str, opener: QWidget | None = None) -> None:
        if self._vm.open_entry(entry_id):
            self._lightbox.present(opener)
        else:
            self.statusBar().showMessage("This portfolio entry has no images to show", 3000)

    def open_hero_gallery(self, opener: QWidget | None = None) -> None:
        if self._vm.open_hero_gallery():
            self._lightbox.present(opener)

    def _sync_page(self) -> None:
        page = self._vm.router.page
        self._stack.setCurrentIndex(self._page_index.get(page, 0))
        for name, btn in self._nav_buttons.items():
            btn.setChecked(name == page)
        self.setWindowTitle(self._vm.window_title)
        if self._vm.last_announcement:
            self.statusBar().showMessage(self._vm.last_announcement, 2000)
        logger.debug("Showing page {}", page)

    def closeEvent(self, event) -> None:  # noqa: N802
        self._lightbox.cleanup()
        self._vm.shutdown()
        super().closeEvent(event)


def _heading(text: str, style: str) -> QLabel:
    label = QLabel(text)
    label.setStyleSheet(style)
    label.setWordWrap(True)
    return label


def _paragraph(text: str) -> QLabel:
    label = QLabel(text)
    label.setWordWrap(True)
    return label


def _card_row(cards: list[TextCard]) -> QHBoxLayout:
    row = QHBoxLayout()
    row.setSpacing(GRID_SPACING_PX)
    for card in cards:
        box = QFrame()
        box.setFrameShape(QFrame.StyledPanel)
        inner = QVBoxLayout(box)
        inner.addWidget(_heading(card.title, CARD_TITLE_STYLE))
        if card.body:
            inner.addWidget(_paragraph(card.body))
        inner.addStretch()
        row.addWidget(box, 1)
    return row


def _scrollable(page: QWidget) -> QScrollArea:
    area = QScrollArea()
    area.setWidgetResizable(True)
    area.setWidget(page)
    return area
