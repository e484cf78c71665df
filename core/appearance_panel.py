"""
Appearance Preferences Panel

Toolkit-independent controller for the Appearance preferences page.

The panel owns no widgets. It talks to:
- an AppearanceStore (persisted preferences, e.g. AppSettingsController)
- a FontPicker (system font dialog)
- an AppearanceView built on demand by the injected view factory

Every user action writes the one preference it changed straight to the
store; there is no Apply/Cancel step.
"""
from typing import Callable, Optional, Protocol, Sequence

from models.appearance import (
    FontChoice, MinimumFontSizePreference, FolderImagesPreference,
    MINIMUM_FONT_SIZES, is_valid_minimum_size
)
from utils.logger import logger


class AppearanceStore(Protocol):
    """Persisted appearance preferences."""

    def get_article_font(self) -> FontChoice: ...
    def set_article_font(self, font: FontChoice) -> None: ...
    def get_folder_font(self) -> FontChoice: ...
    def set_folder_font(self, font: FontChoice) -> None: ...
    def get_minimum_font_size(self) -> MinimumFontSizePreference: ...
    def set_minimum_font_size(self, value: MinimumFontSizePreference) -> None: ...
    def get_show_folder_images(self) -> bool: ...
    def set_show_folder_images(self, visible: bool) -> None: ...


class FontPicker(Protocol):
    """Returns the confirmed font, or None when the user cancels."""

    def pick_font(self, initial: FontChoice, title: str) -> Optional[FontChoice]: ...


class AppearanceView(Protocol):
    """Controls of the Appearance page as seen by the panel."""

    def set_article_preview(self, text: str, font: FontChoice) -> None: ...
    def set_folder_preview(self, text: str, font: FontChoice) -> None: ...
    def set_minimum_size_choices(self, sizes: Sequence[int]) -> None: ...
    def set_minimum_size_value(self, size: int) -> None: ...
    def minimum_size_value(self) -> Optional[int]: ...
    def set_minimum_size_control_enabled(self, enabled: bool) -> None: ...
    def set_minimum_size_checked(self, checked: bool) -> None: ...
    def set_show_folder_images_checked(self, checked: bool) -> None: ...


class AppearanceSettingsPanel:
    """
    Preferences page for article/folder fonts, minimum font size and folder images.

    Usage:
        panel = AppearanceSettingsPanel(
            store=controller,
            font_picker=QtFontPicker(parent),
            view_factory=AppearanceSettingsPage
        )
        widget = panel.root_view()
    """

    identifier = "AppearancePreferences"
    toolbar_label = "Appearance"
    toolbar_icon = "preferences-desktop-font"

    def __init__(
            self,
            store: AppearanceStore,
            font_picker: FontPicker,
            view_factory: Callable[['AppearanceSettingsPanel'], AppearanceView]
    ):
        self.store = store
        self.font_picker = font_picker
        self._view_factory = view_factory
        self._view: Optional[AppearanceView] = None

        # Transient copies, refreshed by reload()
        self._article_font = store.get_article_font()
        self._folder_font = store.get_folder_font()
        self._minimum_font_size = store.get_minimum_font_size()
        self._folder_images = FolderImagesPreference(store.get_show_folder_images())

    # ============================================================
    # Preferences page contract
    # ============================================================

    def root_view(self) -> AppearanceView:
        """Build the view on first use, load it from the store and return it."""
        if self._view is None:
            self._view = self._view_factory(self)
            self._view.set_minimum_size_choices(MINIMUM_FONT_SIZES)
            self.reload()
        return self._view

    @property
    def view(self) -> AppearanceView:
        if self._view is None:
            raise RuntimeError("Appearance panel has no view yet; call root_view() first")
        return self._view

    # ============================================================
    # Current values
    # ============================================================

    @property
    def article_font(self) -> FontChoice:
        return self._article_font

    @property
    def folder_font(self) -> FontChoice:
        return self._folder_font

    @property
    def minimum_font_size(self) -> MinimumFontSizePreference:
        return self._minimum_font_size

    @property
    def folder_images(self) -> FolderImagesPreference:
        return self._folder_images

    def reload(self) -> None:
        """Re-read every preference from the store and push it to the view."""
        self._article_font = self.store.get_article_font()
        self._folder_font = self.store.get_folder_font()
        self._minimum_font_size = self.store.get_minimum_font_size()
        self._folder_images = FolderImagesPreference(self.store.get_show_folder_images())

        if self._view is None:
            return

        view = self._view
        view.set_article_preview(self._article_font.sample_text, self._article_font)
        view.set_folder_preview(self._folder_font.sample_text, self._folder_font)
        view.set_minimum_size_checked(self._minimum_font_size.enabled)
        view.set_minimum_size_value(self._minimum_font_size.size)
        view.set_minimum_size_control_enabled(self._minimum_font_size.enabled)
        view.set_show_folder_images_checked(self._folder_images.visible)

    # ============================================================
    # Fonts
    # ============================================================

    def select_article_font(self) -> None:
        """Let the user pick the article list font."""
        choice = self.font_picker.pick_font(self._article_font, "Article List Font")
        if choice is None or choice == self._article_font:
            return

        self.store.set_article_font(choice)
        self._article_font = choice
        self.view.set_article_preview(choice.sample_text, choice)
        logger.info(f"Article font set to {choice}", source="Appearance")

    def select_folder_font(self) -> None:
        """Let the user pick the folder list font."""
        choice = self.font_picker.pick_font(self._folder_font, "Folder List Font")
        if choice is None or choice == self._folder_font:
            return

        self.store.set_folder_font(choice)
        self._folder_font = choice
        self.view.set_folder_preview(choice.sample_text, choice)
        logger.info(f"Folder font set to {choice}", source="Appearance")

    # ============================================================
    # Minimum font size
    # ============================================================

    def change_minimum_font_size(self, enabled: bool) -> None:
        """
        Turn minimum font size enforcement on or off.

        Turning it on takes the size shown in the selector, falling back to
        the retained size (the default when nothing was stored). Turning it off keeps the
        stored size so it comes back on re-enable.
        """
        enabled = bool(enabled)
        current = self._minimum_font_size

        if enabled:
            size = self.view.minimum_size_value()
            if not is_valid_minimum_size(size):
                size = current.size
            updated = MinimumFontSizePreference(enabled=True, size=size)
        else:
            updated = current.with_enabled(False)

        self.store.set_minimum_font_size(updated)
        self._minimum_font_size = updated

        if enabled:
            self.view.set_minimum_size_value(updated.size)
        self.view.set_minimum_size_control_enabled(enabled)
        logger.info(
            f"Minimum font size {'enabled' if enabled else 'disabled'} ({updated.size} pt)",
            source="Appearance"
        )

    def select_minimum_font_size(self, size: int) -> None:
        """Persist a new minimum size. Inert while enforcement is off."""
        current = self._minimum_font_size
        if not current.enabled:
            logger.debug(f"Ignoring minimum font size {size!r}: enforcement is off", source="Appearance")
            return

        if not is_valid_minimum_size(size):
            logger.warning(
                f"Ignoring minimum font size {size!r}: not one of {list(MINIMUM_FONT_SIZES)}",
                source="Appearance"
            )
            self.view.set_minimum_size_value(current.size)
            return

        if size == current.size:
            return

        updated = current.with_size(size)
        self.store.set_minimum_font_size(updated)
        self._minimum_font_size = updated
        logger.info(f"Minimum font size set to {size} pt", source="Appearance")

    # ============================================================
    # Folder images
    # ============================================================

    def change_show_folder_images(self, visible: bool) -> None:
        """Show or hide folder icons in the folder list."""
        visible = bool(visible)
        self.store.set_show_folder_images(visible)
        self._folder_images = FolderImagesPreference(visible)
        logger.info(f"Folder images {'shown' if visible else 'hidden'}", source="Appearance")
