"""Qt stylesheets for the trivia screens."""

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        text = ColorPalette.TEXT_PRIMARY.get(theme)
        muted = ColorPalette.TEXT_SECONDARY.get(theme)
        surface = ColorPalette.BACKGROUND_PRIMARY.get(theme)
        page = ColorPalette.BACKGROUND_SECONDARY.get(theme)
        raised = ColorPalette.BACKGROUND_TERTIARY.get(theme)
        border = ColorPalette.BORDER_PRIMARY.get(theme)
        accent = ColorPalette.BUTTON_PRIMARY_BG.get(theme)
        return f"""
            QMainWindow, QDialog {{ background-color: {page}; }}
            QWidget {{
                background-color: {surface};
                color: {text};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QLabel {{ background: transparent; }}
            QPushButton {{
                background-color: {raised};
                border: 1px solid {border};
                border-radius: 8px;
                padding: 8px 14px;
            }}
            QPushButton:hover {{ background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)}; }}
            QPushButton:disabled {{ color: {muted}; }}
            QLineEdit, QSpinBox {{
                border: 1px solid {border};
                border-radius: 6px;
                padding: 6px;
            }}
            QLineEdit:focus, QSpinBox:focus {{ border: 1px solid {accent}; }}
            QProgressBar {{
                background-color: {raised};
                border: none;
                border-radius: 4px;
                max-height: 8px;
            }}
            QProgressBar::chunk {{ background-color: {accent}; border-radius: 4px; }}
            QGroupBox {{
                border: 1px solid {border};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
            QGroupBox::title {{ subcontrol-origin: margin; left: 10px; padding: 0 3px; }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_filled_button_style(background: str, font_size: int = 12) -> str:
        """Solid colored button used for topics, difficulties and result actions."""
        return (
            f"QPushButton {{ background-color: {background}; color: #FFFFFF; font-weight: bold; "
            f"font-size: {font_size}pt; border: none; border-radius: 10px; padding: 12px 18px; }}"
            f"QPushButton:disabled {{ background-color: {background}; color: #FFFFFF; }}"
        )

    @staticmethod
    def get_stat_tile_style(theme: Theme) -> str:
        return (
            f"background-color: {ColorPalette.BACKGROUND_TERTIARY.get(theme)}; "
            "border-radius: 8px; padding: 8px;"
        )
