#!/usr/bin/env python3
"""
Main GUI Application - XML Formatter Pro.
Tkinter interface with:
- Input and output editors side by side
- Validate / Format / Minify with selectable indent width
- Syntax-highlighted output
- Copy to clipboard and save to file
- Theme toggle (Light/Dark/System)
- Drag & drop of XML files into the input editor
"""

import os
import sys
import logging
import tkinter as tk
from tkinter import ttk, filedialog, messagebox, scrolledtext
from pathlib import Path

import customtkinter as ctk
import darkdetect

from ..config import (
    APP_TITLE, INDENT_CHOICES, DEFAULT_EXPORT_NAME, MESSAGES,
    LIGHT_THEME, DARK_THEME, ThemeColors, AppConfig,
)
from ..models import Notification
from ..session import FormatterSession
from ..utils.file_utils import read_file_safe
from ..utils.highlight import iter_tagged_spans, TOKEN_TAGS

logger = logging.getLogger(__name__)

THEMES = ["Light", "Dark", "System"]


class FormatterApp:
    """Main application window for XML Formatter Pro."""

    def __init__(self, root: tk.Tk):
        self.root = root
        self.root.title(APP_TITLE)
        self.root.minsize(900, 600)

        # State
        self.config = AppConfig.load()
        self.session = FormatterSession(self.config.indent_width)
        self.current_theme = self.config.theme
        self.colors = LIGHT_THEME

        self._setup_styles()
        self._setup_menu()
        self._setup_toolbar()
        self._setup_error_banner()
        self._setup_main_layout()
        self._setup_statusbar()
        self._setup_drag_drop()
        self._apply_theme(self.current_theme)

        if self.config.window_geometry:
            try:
                self.root.geometry(self.config.window_geometry)
            except tk.TclError:
                pass

        self.root.protocol("WM_DELETE_WINDOW", self._on_close)
        logger.info("Application initialized")

    # ─── Setup ─────────────────────────────────────────────

    def _setup_styles(self):
        self.style = ttk.Style()
        self.style.theme_use('clam')
        self.style.configure("Toolbar.TButton", padding=(8, 4))
        self.style.configure("Status.TLabel", padding=(4, 2))

    def _setup_menu(self):
        menu = tk.Menu(self.root)
        self.root.config(menu=menu)

        file_m = tk.Menu(menu, tearoff=0)
        menu.add_cascade(label="File", menu=file_m)
        file_m.add_command(label="Open XML...", command=self.open_file, accelerator="Ctrl+O")
        file_m.add_command(label="Save Output As...", command=self.save_output, accelerator="Ctrl+S")

        self.recent_menu = tk.Menu(file_m, tearoff=0)
        file_m.add_cascade(label="Recent Files", menu=self.recent_menu)
        self._update_recent_menu()

        file_m.add_separator()
        file_m.add_command(label="Exit", command=self._on_close)

        xml_m = tk.Menu(menu, tearoff=0)
        menu.add_cascade(label="XML", menu=xml_m)
        xml_m.add_command(label="Validate", command=self.validate, accelerator="F5")
        xml_m.add_command(label="Format", command=self.format, accelerator="F6")
        xml_m.add_command(label="Minify", command=self.minify, accelerator="F7")
        xml_m.add_separator()
        xml_m.add_command(label="Copy Output", command=self.copy_output)
        xml_m.add_command(label="Clear", command=self.clear_all)

        theme_m = tk.Menu(menu, tearoff=0)
        menu.add_cascade(label="Theme", menu=theme_m)
        theme_m.add_command(label="Light Mode", command=lambda: self._apply_theme("Light"))
        theme_m.add_command(label="Dark Mode", command=lambda: self._apply_theme("Dark"))
        theme_m.add_command(label="System Default", command=lambda: self._apply_theme("System"))

        help_m = tk.Menu(menu, tearoff=0)
        menu.add_cascade(label="Help", menu=help_m)
        help_m.add_command(label="About", command=self._show_about)

        self.root.bind("<Control-o>", lambda e: self.open_file())
        self.root.bind("<Control-s>", lambda e: self.save_output())
        self.root.bind("<F5>", lambda e: self.validate())
        self.root.bind("<F6>", lambda e: self.format())
        self.root.bind("<F7>", lambda e: self.minify())

    def _setup_toolbar(self):
        tb = ttk.Frame(self.root)
        tb.pack(fill=tk.X, padx=8, pady=(8, 4))

        ttk.Label(tb, text="Indent:").pack(side=tk.LEFT, padx=(2, 4))
        self.indent_var = tk.StringVar(value=str(self.session.indent_width))
        indent_box = ttk.Combobox(
            tb, textvariable=self.indent_var, width=4, state="readonly",
            values=[str(w) for w in INDENT_CHOICES],
        )
        indent_box.pack(side=tk.LEFT, padx=2)
        indent_box.bind("<<ComboboxSelected>>", self._on_indent_change)

        ttk.Separator(tb, orient=tk.VERTICAL).pack(side=tk.LEFT, fill=tk.Y, padx=6, pady=2)

        ttk.Button(tb, text="\u2714 Validate", command=self.validate,
                   style="Toolbar.TButton").pack(side=tk.LEFT, padx=2)
        ttk.Button(tb, text="\u2728 Format", command=self.format,
                   style="Toolbar.TButton").pack(side=tk.LEFT, padx=2)
        ttk.Button(tb, text="\U0001f5dc Minify", command=self.minify,
                   style="Toolbar.TButton").pack(side=tk.LEFT, padx=2)

        ttk.Button(tb, text="\U0001f5d1 Clear", command=self.clear_all,
                   style="Toolbar.TButton").pack(side=tk.RIGHT, padx=2)

        self.theme_btn = ttk.Button(tb, text="\U0001f313 Theme", command=self._toggle_theme,
                                    style="Toolbar.TButton")
        self.theme_btn.pack(side=tk.RIGHT, padx=2)

    def _setup_error_banner(self):
        self.error_var = tk.StringVar(value="")
        self.error_lbl = tk.Label(self.root, textvariable=self.error_var, anchor="w",
                                  padx=10, pady=4, relief=tk.RIDGE, font=('Segoe UI', 9))

    def _setup_main_layout(self):
        pane = ttk.PanedWindow(self.root, orient=tk.HORIZONTAL)
        pane.pack(fill=tk.BOTH, expand=True, padx=8, pady=4)
        self.main_pane = pane

        # Left: input
        in_fr = ttk.LabelFrame(pane, text="\U0001f4dd Input XML")
        pane.add(in_fr, weight=1)
        self.input_txt = scrolledtext.ScrolledText(in_fr, wrap="none", font=('Consolas', 10), undo=True)
        self.input_txt.pack(fill=tk.BOTH, expand=True, padx=5, pady=5)

        # Right: output
        out_fr = ttk.LabelFrame(pane, text="\U0001f4c4 Output")
        pane.add(out_fr, weight=1)

        out_tb = ttk.Frame(out_fr)
        out_tb.pack(fill=tk.X, padx=5, pady=(2, 0))
        ttk.Button(out_tb, text="\U0001f4cb Copy", command=self.copy_output).pack(side=tk.RIGHT, padx=2)
        ttk.Button(out_tb, text="\U0001f4be Save", command=self.save_output).pack(side=tk.RIGHT, padx=2)

        self.output_txt = scrolledtext.ScrolledText(out_fr, wrap="none", font=('Consolas', 10),
                                                    state="disabled")
        self.output_txt.pack(fill=tk.BOTH, expand=True, padx=5, pady=5)

    def _setup_statusbar(self):
        status_frame = ttk.Frame(self.root)
        status_frame.pack(fill=tk.X, side=tk.BOTTOM, before=self.main_pane)

        self.status_var = tk.StringVar(value="Ready.")
        ttk.Label(
            status_frame, textvariable=self.status_var,
            relief=tk.SUNKEN, anchor="w", style="Status.TLabel",
        ).pack(fill=tk.X, padx=2, pady=1)

    def _setup_drag_drop(self):
        """Setup drag and drop support (requires a TkinterDnD root)."""
        try:
            from tkinterdnd2 import DND_FILES
            self.input_txt.drop_target_register(DND_FILES)
            self.input_txt.dnd_bind('<<Drop>>', self._on_drop)
            logger.info("Drag & drop enabled")
        except (ImportError, AttributeError, tk.TclError):
            logger.debug("tkinterdnd2 not available, drag & drop disabled")

    def _on_drop(self, event):
        paths = self.root.tk.splitlist(event.data)
        for p in paths:
            if os.path.isfile(p):
                self._load_file(p)
                break

    # ─── Theme ─────────────────────────────────────────────

    def _resolve_colors(self, theme: str) -> ThemeColors:
        if theme == "System":
            theme = darkdetect.theme() or "Light"
        return DARK_THEME if theme == "Dark" else LIGHT_THEME

    def _apply_theme(self, theme: str):
        self.current_theme = theme
        self.config.theme = theme
        self.colors = self._resolve_colors(theme)

        try:
            self.root.configure(bg=self.colors.bg)
            for txt in (self.input_txt, self.output_txt):
                txt.configure(bg=self.colors.editor_bg, fg=self.colors.fg,
                              insertbackground=self.colors.fg)
            for _, tag in TOKEN_TAGS:
                self.output_txt.tag_config(tag, foreground=getattr(self.colors, tag))
            self.error_lbl.configure(bg=self.colors.err_banner, fg=self.colors.error)
        except tk.TclError:
            pass

        ctk.set_appearance_mode(theme)

        icons = {"Light": "\u2600\ufe0f", "Dark": "\U0001f319", "System": "\U0001f4bb"}
        self.theme_btn.config(text=f"{icons.get(theme, '')} {theme}")
        self._set_status(f"Theme: {theme}")

    def _toggle_theme(self):
        idx = THEMES.index(self.current_theme) if self.current_theme in THEMES else 0
        self._apply_theme(THEMES[(idx + 1) % len(THEMES)])

    # ─── File Management ───────────────────────────────────

    def open_file(self):
        path = filedialog.askopenfilename(
            filetypes=[("XML Files", "*.xml"), ("All Files", "*.*")],
            initialdir=self.config.last_directory or None,
        )
        if path:
            self._load_file(path)

    def _load_file(self, path: str):
        content, enc = read_file_safe(path)
        if content is None:
            messagebox.showerror("Error", enc)
            return
        self.input_txt.delete("1.0", tk.END)
        self.input_txt.insert("1.0", content)
        self.config.last_directory = str(Path(path).parent)
        self.config.add_recent_file(path)
        self._update_recent_menu()
        self._set_status(f"Loaded {os.path.basename(path)} ({enc})")

    def _update_recent_menu(self):
        self.recent_menu.delete(0, tk.END)
        if not self.config.recent_files:
            self.recent_menu.add_command(label="(none)", state="disabled")
            return
        for path in self.config.recent_files:
            self.recent_menu.add_command(label=path, command=lambda p=path: self._load_file(p))

    def save_output(self):
        if not self.session.output_text:
            self._notify(Notification("error", MESSAGES["nothing_to_save"]))
            return
        path = filedialog.asksaveasfilename(
            defaultextension=".xml",
            initialfile=DEFAULT_EXPORT_NAME,
            initialdir=self.config.last_directory or None,
            filetypes=[("XML Files", "*.xml"), ("All Files", "*.*")],
        )
        if path:
            self._notify(self.session.export_output(path))

    # ─── Formatter Actions ─────────────────────────────────

    def _on_indent_change(self, event=None):
        width = int(self.indent_var.get())
        self.session.set_indent_width(width)
        self.config.indent_width = width
        self._set_status(f"Indent: {width} spaces")

    def _sync_input(self):
        self.session.input_text = self.input_txt.get("1.0", "end-1c")

    def validate(self):
        self._sync_input()
        self._notify(self.session.validate())

    def format(self):
        self._sync_input()
        self._notify(self.session.format())
        self._render_output()

    def minify(self):
        self._sync_input()
        self._notify(self.session.minify())
        self._render_output()

    def copy_output(self):
        self._notify(self.session.copy_output(self._write_clipboard))

    def _write_clipboard(self, text: str):
        self.root.clipboard_clear()
        self.root.clipboard_append(text)

    def clear_all(self):
        self.input_txt.delete("1.0", tk.END)
        self._notify(self.session.clear())
        self._render_output()

    # ─── Rendering ─────────────────────────────────────────

    def _render_output(self):
        self.output_txt.config(state="normal")
        self.output_txt.delete("1.0", tk.END)
        if self.session.output_text:
            for tag, chunk in iter_tagged_spans(self.session.output_text):
                self.output_txt.insert(tk.END, chunk, tag or ())
            # pygments appends a newline the output does not have
            self.output_txt.delete("end-2c", "end-1c")
        self.output_txt.config(state="disabled")

    def _notify(self, note: Notification):
        if note.is_error:
            error = self.session.error
            detail = f" ({error.location}: {error.detail})" if error and error.detail else ""
            self.error_var.set(f"Error: {note.message}{detail}")
            self.error_lbl.pack(fill=tk.X, padx=8, before=self.main_pane)
        else:
            self.error_var.set("")
            self.error_lbl.pack_forget()
        self._set_status(note.message)

    # ─── Utility ───────────────────────────────────────────

    def _set_status(self, msg: str):
        self.status_var.set(msg)

    def _show_about(self):
        messagebox.showinfo(
            "About",
            f"{APP_TITLE}\n\n"
            f"Validate, pretty-print and minify XML documents.\n\n"
            f"Features:\n"
            f"  \u2022 Well-formedness check\n"
            f"  \u2022 Indented output (2/4/8 spaces)\n"
            f"  \u2022 Minified output\n"
            f"  \u2022 Syntax highlighting\n"
            f"  \u2022 Dark/Light theme support\n\n"
            f"Python {sys.version.split()[0]}"
        )

    def _on_close(self):
        try:
            self.config.window_geometry = self.root.geometry()
            self.config.save()
        except tk.TclError:
            pass
        self.root.destroy()
