"""QSS stylesheet and colours for PayTimer."""

from __future__ import annotations

from ..timer.engine import Phase

# ── palette ──────────────────────────────────────────────────────────────

PALETTE: dict[str, str] = {
    "bg":           "#FFFFFF",
    "bg_secondary": "#F4F4F6",
    "text":         "#111827",
    "text_muted":   "#6B7280",
    "border":       "#D1D5DB",
    "start":        "#22C55E",   # green-500
    "start_hover":  "#15803D",   # green-700
    "stop":         "#EF4444",   # red-500
    "stop_hover":   "#B91C1C",   # red-700
}

# icon tint per phase
PHASE_COLORS: dict[Phase, str] = {
    Phase.WORKING: "#111827",
    Phase.BREAK:   "#0EA5E9",
}


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str] = PALETTE) -> str:
    p = palette
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    /* ── headings ────────────────────────────────── */
    QLabel#phaseLabel {{
        font-size: 36px;
        font-weight: 700;
    }}

    QLabel#clockLabel,
    QLabel#moneyLabel,
    QLabel#wageLabel {{
        font-size: 24px;
        font-weight: 700;
    }}

    /* ── wage input ──────────────────────────────── */
    QLineEdit#wageInput {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 4px;
        padding: 2px 6px;
        font-size: 24px;
        font-weight: 700;
    }}

    /* ── buttons ─────────────────────────────────── */
    QPushButton {{
        color: #FFFFFF;
        border: none;
        border-radius: 4px;
        padding: 8px 16px;
        font-weight: 700;
    }}

    QPushButton#startButton {{
        background-color: {p['start']};
    }}

    QPushButton#startButton:hover {{
        background-color: {p['start_hover']};
    }}

    QPushButton#stopButton,
    QPushButton#resetButton {{
        background-color: {p['stop']};
    }}

    QPushButton#stopButton:hover,
    QPushButton#resetButton:hover {{
        background-color: {p['stop_hover']};
    }}
    """
