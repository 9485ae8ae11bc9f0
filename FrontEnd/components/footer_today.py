from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel
from FrontEnd.styles.design_tokens import COLORS

class FooterToday(QWidget):
    def __init__(self, today_text, user_text=""):
        super().__init__()
        layout = QHBoxLayout()
        self.user_label = QLabel(user_text)
        self.user_label.setObjectName("UserLabel")
        layout.addWidget(self.user_label)
        layout.addStretch()
        self.label = QLabel(today_text)
        self.label.setObjectName("TodayLabel")
        layout.addWidget(self.label)
        self.setLayout(layout)
        self.setStyleSheet(f"background: {COLORS['footer_bg']}; border-radius: 16px; padding: 8px 24px; margin: 0 32px 16px 32px; color: {COLORS['footer_text']}; font-size: 14px; font-weight: 500;")
    def set_today(self, text):
        self.label.setText(text)
    def set_user(self, text):
        self.user_label.setText(text)
