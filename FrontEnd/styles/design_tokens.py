# Design tokens for Study Organizer UI

COLORS = {
    'background': '#F7F9FC',
    'surface': '#E7F0FF',
    'card': '#FFFFFF',
    'primary': '#5EA1FF',
    'primary_hover': '#4C92F5',
    'text': '#3C4450',
    'text_strong': '#133A62',
    'text_muted': '#8A94A6',
    'border': '#DCE3ED',
    'sidebar_active_bg': '#E7F0FF',
    'sidebar_bg': '#F7F9FC',
    'button_secondary_bg': '#E7F0FF',
    'footer_bg': '#E7F0FF',
    'footer_text': '#133A62',
    'study_ring': '#5EA1FF',
    'break_ring': '#63C297',
    'ring_track': '#DCE3ED',
    'today_cell': '#E7F0FF',
}

PRIORITY_COLORS = {
    'high': '#EF4444',
    'medium': '#EAB308',
    'low': '#22C55E',
}

STATUS_COLORS = {
    'pending': '#8A94A6',
    'in-progress': '#EAB308',
    'completed': '#22C55E',
}

GRADE_BAND_COLORS = {
    'excellent': '#22C55E',
    'good': '#EAB308',
    'fair': '#F97316',
    'poor': '#EF4444',
}

FONTS = {
    'family': 'Inter, Manrope, Arial, sans-serif',
    'timer_size': 72,
    'button_size': 16,
    'sidebar_size': 16,
    'text': 14,
    'text_strong': 22,
}


def build_stylesheet():
    """Application-wide QSS assembled from the tokens above."""
    c, f = COLORS, FONTS
    return f"""
    QWidget {{ background: {c['background']}; color: {c['text']}; font-family: {f['family']}; font-size: {f['text']}px; }}
    QListWidget#Sidebar {{ background: {c['sidebar_bg']}; border: none; font-size: {f['sidebar_size']}px; }}
    QListWidget#Sidebar::item {{ padding: 12px 0 12px 24px; }}
    QListWidget#Sidebar::item:selected {{ background: {c['sidebar_active_bg']}; color: {c['text_strong']}; }}
    QLabel#PageTitle {{ font-size: {f['text_strong']}px; font-weight: 600; color: {c['text_strong']}; }}
    QLabel#TimerLabel {{ font-size: {f['timer_size']}px; font-weight: bold; color: {c['text_strong']}; }}
    QLabel#StatValue {{ font-size: {f['text_strong']}px; font-weight: 600; color: {c['text_strong']}; }}
    QWidget#Card {{ background: {c['card']}; border: 1px solid {c['border']}; border-radius: 12px; }}
    QPushButton {{ background: {c['button_secondary_bg']}; border: 1px solid {c['border']}; border-radius: 8px; padding: 8px 16px; font-size: {f['button_size']}px; }}
    QPushButton#StartBtn {{ background: {c['primary']}; color: white; border: none; }}
    QPushButton#StartBtn:hover {{ background: {c['primary_hover']}; }}
    QLineEdit, QTextEdit, QComboBox, QSpinBox, QDateEdit, QTimeEdit {{ background: {c['card']}; border: 1px solid {c['border']}; border-radius: 6px; padding: 4px; }}
    """
