# app.py
# CustomTkinter GUI for the tag cloud generator (dark theme).
# - Load a text document (background thread keeps the UI responsive).
# - Pick how many words go in the cloud; preview word / count / size.
# - Save the cloud as an HTML page.

from __future__ import annotations
import threading
from typing import Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

# Project imports (package installed, or PYTHONPATH=src)
from tagcloud import Engine, TagCloud, render_html
from tagcloud.config import DEFAULT_TAG_COUNT


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


# -------------------- main app --------------------

class TagCloudApp(ctk.CTk):
    """Dark-themed GUI that loads a document and builds its tag cloud."""

    def __init__(self) -> None:
        super().__init__()

        # Theme
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        # Window
        self.title("Tag Cloud Generator")
        self.geometry("900x650")
        self.minsize(820, 560)

        # State
        self._engine = Engine()
        self._doc_loaded: bool = False
        self._loading_thread: Optional[threading.Thread] = None
        self._cloud: Optional[TagCloud] = None

        # Fonts
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        # Layout grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # results
        self.grid_rowconfigure(4, weight=1)  # log

        # Build UI
        self._build_header()
        self._build_source_bar()
        self._build_controls()
        self._build_results()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        header.grid_columnconfigure(0, weight=1)

        title = ctk.CTkLabel(header, text="Tag Cloud Generator", font=self.font_title)
        title.grid(row=0, column=0, sticky="w", padx=12, pady=10)

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(1, weight=1)

        btn_file = ctk.CTkButton(bar, text="Choose File", command=self._choose_file)
        btn_file.grid(row=0, column=0, padx=(12, 6), pady=10)

        self.lbl_source = ctk.CTkLabel(bar, text="No document selected", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=1, sticky="ew", padx=(6, 6), pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", determinate_speed=1.2)
        self.progress.grid(row=0, column=2, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=3, sticky="e", padx=12, pady=10)

    def _build_controls(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=(6, 6))

        ctk.CTkLabel(box, text="Number of words:", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )
        self.entry_n = ctk.CTkEntry(box, width=80)
        self.entry_n.insert(0, str(DEFAULT_TAG_COUNT))
        self.entry_n.grid(row=0, column=1, sticky="w", padx=6, pady=10)
        self.entry_n.bind("<Return>", lambda _ev: self._generate())

        ctk.CTkButton(box, text="Generate", command=self._generate).grid(row=0, column=2, padx=6, pady=10)
        ctk.CTkButton(box, text="Save HTML", command=self._save_html).grid(row=0, column=3, padx=(6, 12), pady=10)

    def _build_results(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=(6, 6))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Cloud", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )

        self.txt_results = ctk.CTkTextbox(frame, wrap="none", font=self.font_mono)
        self.txt_results.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self.txt_results.configure(state="disabled")
        self._set_results("(no cloud yet: choose a document and press Generate)")

    def _build_log(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Event log", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )

        self.txt_log = ctk.CTkTextbox(frame, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self._log("GUI ready. Choose a text document to begin.")

    # --------- loading (threaded) ---------

    def _choose_file(self) -> None:
        path = fd.askopenfilename(
            title="Choose text document",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")]
        )
        if not path:
            return
        self._start_loading(path)

    def _start_loading(self, path: str) -> None:
        # prevent re-entrancy
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "A document is already loading. Please wait.")
            return

        self.lbl_source.configure(text=shorten_path(path))
        self._set_status("Counting words…")
        self.progress.start()
        self._doc_loaded = False
        self._cloud = None

        self._loading_thread = threading.Thread(target=self._load_worker, args=(path,), daemon=True)
        self._loading_thread.start()

    def _load_worker(self, path: str) -> None:
        try:
            self._engine.load(path)
        except OSError as exc:
            self.after(0, lambda e=exc: self._on_load_error(e))
            return
        self.after(0, self._on_load_ok)

    def _on_load_ok(self) -> None:
        self.progress.stop()
        self._doc_loaded = True
        distinct, total = self._engine.distinct_words, self._engine.total_words
        self._set_status(f"{distinct:,} distinct / {total:,} words")
        self._log(f"Document ready ({distinct} distinct words, {total} words).")
        self.entry_n.focus_set()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while loading document.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", f"Failed to read document.\n{exc}")

    # --------- cloud ---------

    def _generate(self) -> None:
        if not self._doc_loaded:
            mb.showinfo("No document", "Please choose a document first.")
            return
        try:
            n = int(self.entry_n.get().strip())
            self._cloud = self._engine.cloud(n)
        except ValueError:
            # not a number, or TagCountError; the document decides the valid range
            self._log(f"Invalid word count {self.entry_n.get()!r}.")
            mb.showerror("Invalid size", f"Enter a number between 1 and {self._engine.distinct_words}.")
            return

        c = self._cloud
        lines = [f"{'word':<24} {'count':>7} {'size':>5}"]
        lines += [f"{e.word:<24} {e.count:>7} {e.font_size:>5}" for e in c.entries]
        self._set_results("\n".join(lines))
        self._log(f"Cloud of {c.n} words (counts {c.min_count}..{c.max_count}).")

    def _save_html(self) -> None:
        if self._cloud is None:
            mb.showinfo("Nothing to save", "Generate a cloud first.")
            return
        path = fd.asksaveasfilename(
            title="Save tag cloud", defaultextension=".html",
            filetypes=[("HTML", "*.html"), ("All files", "*.*")]
        )
        if not path:
            return
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(render_html(self._cloud))
        except OSError as exc:
            self._log(f"ERROR: {exc!r}")
            mb.showerror("Save error", str(exc))
            return
        self._log(f"Saved {path}")

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_results(self, text: str) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.delete("0.0", "end")
        if text:
            self.txt_results.insert("end", text)
        self.txt_results.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    # --------- lifecycle ---------

    def _on_close(self) -> None:
        self._engine.shutdown()
        self.destroy()


def main() -> None:
    app = TagCloudApp()
    app.mainloop()


if __name__ == "__main__":
    main()
