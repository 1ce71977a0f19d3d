"""
GUI for LineCalc
Tkinter keypad and display driving the expression builder
"""
import tkinter as tk
import config
from calculator import ExpressionBuilder

SQUARE = "x²"
BACKSPACE = "⌫"

# (label, kind, columnspan)
KEYPAD = [
    [("C", "clear", 1), (BACKSPACE, "edit", 1), ("/", "operator", 1), ("*", "operator", 1)],
    [("7", "digit", 1), ("8", "digit", 1), ("9", "digit", 1), ("-", "operator", 1)],
    [("4", "digit", 1), ("5", "digit", 1), ("6", "digit", 1), ("+", "operator", 1)],
    [("1", "digit", 1), ("2", "digit", 1), ("3", "digit", 1), ("=", "equals", 1)],
    [("0", "digit", 2), (".", "digit", 1), (SQUARE, "operator", 1)],
]


class LineCalcGUI:
    def __init__(self, root, dark_mode=config.DARK_MODE):
        self.root = root
        self.root.title(config.APP_NAME)
        self.root.geometry(f"{config.WINDOW_WIDTH}x{config.WINDOW_HEIGHT}")

        self.builder = ExpressionBuilder(on_evaluation_failed=self._on_evaluation_failed)
        self.dark_mode: bool = dark_mode
        self.T: dict = config.get_theme(self.dark_mode)
        self.root.configure(bg=self.T["bg"])

        self.create_widgets()
        self.update_display()
        self.root.bind('<Key>', self.on_key_press)

    def _btn(self, parent, text, kind="digit"):
        """Create a flat keypad button."""
        T = self.T
        if kind == "equals":
            bg, fg = T["equals_bg"], T["equals_fg"]
        elif kind == "operator":
            bg, fg = T["operator_bg"], T["operator_fg"]
        elif kind == "clear":
            bg, fg = T["clear_bg"], T["clear_fg"]
        elif kind == "edit":
            bg, fg = T["edit_bg"], T["edit_fg"]
        else:
            bg, fg = T["btn_bg"], T["btn_fg"]
        return tk.Button(
            parent, text=text,
            command=lambda: self.calculator_button_click(text),
            font=config.BUTTON_FONT,
            bg=bg, fg=fg,
            activebackground=bg, activeforeground=fg,
            relief=tk.FLAT, bd=0, cursor="hand2",
        )

    # ── Inline toast (replaces messagebox popups) ────────────────────────
    def _show_toast(self, msg, duration=config.TOAST_DURATION_MS):
        """Show an error banner at the top of the window."""
        bg = self.T["danger"]
        toast = tk.Frame(self.root, bg=bg)
        toast.place(relx=0.05, y=10, relwidth=0.9, height=36)
        toast.lift()
        tk.Label(toast, text=f"  ✗  {msg}",
                 font=(config.BUTTON_FONT[0], 9, "bold"),
                 bg=bg, fg="#FFFFFF", anchor="w").pack(side=tk.LEFT, fill=tk.X, expand=True)
        tk.Button(toast, text="✕", font=(config.BUTTON_FONT[0], 9),
                  bg=bg, fg="#FFFFFF", relief=tk.FLAT, bd=0,
                  command=toast.destroy, cursor="hand2",
                  activebackground=bg).pack(side=tk.RIGHT, padx=4)
        self.root.after(duration, lambda: toast.destroy() if toast.winfo_exists() else None)

    def _on_evaluation_failed(self, message):
        self._show_toast(message)

    def create_widgets(self):
        """Create display and keypad"""
        T = self.T

        display_frame = tk.Frame(self.root, bg=T["display_bg"], padx=16, pady=16)
        display_frame.pack(side=tk.TOP, fill=tk.X, padx=12, pady=12)

        self.display = tk.Label(display_frame, text="0", font=config.DISPLAY_FONT,
                                bg=T["display_bg"], fg=T["display_fg"],
                                anchor="e", justify=tk.RIGHT,
                                wraplength=config.WINDOW_WIDTH - 60)
        self.display.pack(fill=tk.X)

        self.result_label = tk.Label(display_frame, text="", font=config.RESULT_FONT,
                                     bg=T["display_bg"], fg=T["result_fg"], anchor="e")
        self.result_label.pack(fill=tk.X, pady=(8, 0))

        keypad = tk.Frame(self.root, bg=T["bg"])
        keypad.pack(side=tk.BOTTOM, fill=tk.BOTH, expand=True, padx=10, pady=6)

        for r, row in enumerate(KEYPAD):
            keypad.rowconfigure(r, weight=1)
            col = 0
            for label, kind, span in row:
                self._btn(keypad, label, kind).grid(
                    row=r, column=col, columnspan=span, sticky="nsew", padx=6, pady=6)
                col += span
        for c in range(4):
            keypad.columnconfigure(c, weight=1)

    def update_display(self):
        """Refresh the expression and result labels"""
        self.display.config(text=self.builder.display_text())
        self.result_label.config(text=self.builder.result_text())

    def calculator_button_click(self, button):
        """Handle calculator button clicks"""
        if button in '0123456789':
            self.builder.append_digit(button)
        elif button == '.':
            self.builder.append_dot()
        elif button in config.OPERATORS:
            self.builder.append_operator(button)
        elif button == '=':
            self.builder.evaluate()
        elif button == SQUARE:
            self.builder.square_current()
        elif button == 'C':
            self.builder.clear()
        elif button == BACKSPACE:
            self.builder.backspace()
        self.update_display()

    def on_key_press(self, event):
        """Handle keyboard input"""
        key = event.char
        if key and key in '0123456789.+-*/':
            self.calculator_button_click(key)
        elif key in ['\r', '\n', '=']:
            self.calculator_button_click('=')
        elif key in ['s', 'S']:
            self.calculator_button_click(SQUARE)
        elif event.keysym == 'BackSpace':
            self.calculator_button_click(BACKSPACE)
        elif event.keysym == 'Escape':
            self.calculator_button_click('C')
