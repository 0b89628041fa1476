import tkinter as tk
from tkinter import filedialog
import ctypes
import logging
import os
from typing import List, Optional

from pdfmerger.about import APP_TITLE, about_text
from pdfmerger.icon import icon_photo
from pdfmerger.merge_queue import ButtonStates, derive_button_states
from pdfmerger.settings import AppSettings, load_settings
from pdfmerger.workflow import MergeWorkflow

logger = logging.getLogger("simple_pdf_merger")

PDF_FILETYPES = [("PDF Files", "*.pdf")]
PLACEHOLDER_TEXT = 'Click "Add PDF" to select PDFs to merge.'
ALERT_ICON_SIZE = 64


def _enable_dpi_awareness() -> None:
    if os.name != 'nt':
        return
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(2)
    except Exception:
        try:
            ctypes.windll.user32.SetProcessDPIAware()
        except Exception:
            pass


class TkFilePicker:
    """Open/save dialogs restricted to PDF files. Cancel returns None."""

    def __init__(self, parent, initial_directory: str):
        self.parent = parent
        self.initial_directory = initial_directory

    def choose_open(self) -> Optional[str]:
        path = filedialog.askopenfilename(
            parent=self.parent,
            title="Select a PDF to merge",
            filetypes=PDF_FILETYPES,
            initialdir=self.initial_directory,
        )
        return os.path.abspath(path) if path else None

    def choose_save(self) -> Optional[str]:
        path = filedialog.asksaveasfilename(
            parent=self.parent,
            title="Save merged PDF as",
            filetypes=PDF_FILETYPES,
            defaultextension=".pdf",
            initialdir=self.initial_directory,
        )
        return os.path.abspath(path) if path else None


class SimplePDFMergerApp:
    def _get_dpi_scale(self) -> float:
        try:
            return self.root.winfo_fpixels("1i") / 96.0
        except Exception:
            return 1.0

    def _scale_geometry(self, width: int, height: int) -> tuple[int, int]:
        scale = self._get_dpi_scale()
        return max(1, int(width * scale)), max(1, int(height * scale))

    def __init__(self, root, settings: Optional[AppSettings] = None):
        self.root = root
        self.settings = settings or AppSettings()
        self.root.title(APP_TITLE)

        # Center window on screen
        window_width, window_height = self._scale_geometry(
            self.settings.window_width, self.settings.window_height
        )
        center_x = int((self.root.winfo_screenwidth() - window_width) / 2)
        center_y = int((self.root.winfo_screenheight() - window_height) / 2)
        self.root.geometry(f"{window_width}x{window_height}+{center_x}+{center_y}")

        # Keep references so the images aren't garbage-collected
        self._window_icon = None
        self._alert_icon = None
        try:
            self._window_icon = icon_photo(256)
            self._alert_icon = icon_photo(ALERT_ICON_SIZE)
            self.root.iconphoto(True, self._window_icon)
        except (ImportError, OSError, tk.TclError):
            logger.debug("Could not build the application icon", exc_info=True)

        self.workflow = MergeWorkflow(
            picker=TkFilePicker(self.root, self.settings.initial_directory),
            notify=self.alert,
            on_change=self.refresh_list,
        )

        self._setup_menu_bar()
        self._setup_layout()
        self.refresh_list([], derive_button_states(0))

    def _setup_menu_bar(self):
        menu_bar = tk.Menu(self.root)

        file_menu = tk.Menu(menu_bar, tearoff=0)
        file_menu.add_command(label="Exit", command=self.exit_app)
        menu_bar.add_cascade(label="File", menu=file_menu)

        help_menu = tk.Menu(menu_bar, tearoff=0)
        help_menu.add_command(label="About this program", command=self.show_about)
        menu_bar.add_cascade(label="Help", menu=help_menu)

        self.root.config(menu=menu_bar)

    def _setup_layout(self):
        main_frame = tk.Frame(self.root, padx=10, pady=10)
        main_frame.pack(fill=tk.BOTH, expand=True)

        button_frame = tk.Frame(main_frame)
        button_frame.pack(anchor=tk.W, pady=(0, 5))

        self.add_button = tk.Button(button_frame, text="Add PDF", command=self.on_add)
        self.add_button.pack(side=tk.LEFT, padx=(0, 5))
        self.remove_button = tk.Button(button_frame, text="Remove PDF", command=self.on_remove)
        self.remove_button.pack(side=tk.LEFT, padx=(0, 5))
        self.merge_button = tk.Button(button_frame, text="Merge PDFs", command=self.on_merge)
        self.merge_button.pack(side=tk.LEFT)

        # Files are merged in the order they appear in the list
        list_frame = tk.Frame(main_frame, bd=0, highlightbackground="#CCCCCC", highlightthickness=1)
        list_frame.pack(fill=tk.BOTH, expand=True)

        scrollbar = tk.Scrollbar(list_frame)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)

        self.listbox = tk.Listbox(
            list_frame,
            yscrollcommand=scrollbar.set,
            selectmode=tk.SINGLE,
            activestyle="none",
            bd=0,
            highlightthickness=0,
            exportselection=False,
        )
        self.listbox.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        scrollbar.config(command=self.listbox.yview)

        self.placeholder_label = tk.Label(
            self.listbox, text=PLACEHOLDER_TEXT, bg=self.listbox.cget("bg"), fg="#666666"
        )

        self.context_menu = tk.Menu(self.listbox, tearoff=0)
        self.context_menu.add_command(label="Add PDF", command=self.on_add)
        self.context_menu.add_command(label="Remove PDF", command=self.on_remove)
        self.listbox.bind("<Button-3>", self.show_context_menu)
        # Button-2 is the secondary click only on macOS; elsewhere it is middle-click
        if self.root.tk.call("tk", "windowingsystem") == "aqua":
            self.listbox.bind("<Button-2>", self.show_context_menu)

    def selected_index(self) -> Optional[int]:
        selection = self.listbox.curselection()
        return selection[0] if selection else None

    def refresh_list(self, pdf_files: List[str], states: ButtonStates):
        """Redraw the list and re-derive button states from the queue."""
        self.listbox.delete(0, tk.END)
        for path in pdf_files:
            self.listbox.insert(tk.END, path)

        if pdf_files:
            self.placeholder_label.place_forget()
        else:
            self.placeholder_label.place(relx=0.5, rely=0.5, anchor="center")

        self.merge_button.config(state=tk.NORMAL if states.merge_enabled else tk.DISABLED)
        self.remove_button.config(state=tk.NORMAL if states.remove_enabled else tk.DISABLED)

    def can_remove(self) -> bool:
        return self.listbox.size() > 0 and self.selected_index() is not None

    def update_context_menu(self):
        # Remove only makes sense with a non-empty list and a selection
        self.context_menu.entryconfig(1, state=tk.NORMAL if self.can_remove() else tk.DISABLED)

    def show_context_menu(self, event):
        self.update_context_menu()
        try:
            self.context_menu.tk_popup(event.x_root, event.y_root)
        finally:
            self.context_menu.grab_release()

    def on_add(self):
        self.workflow.add()

    def on_remove(self):
        self.workflow.remove(self.selected_index())

    def on_merge(self):
        self.workflow.merge()

    def alert(self, message: str):
        """Show a blocking message with the app title and icon"""
        alert_window = tk.Toplevel(self.root)
        alert_window.title(APP_TITLE)
        if self._window_icon is not None:
            alert_window.iconphoto(False, self._window_icon)
        alert_window.resizable(False, False)
        alert_window.transient(self.root)

        body = tk.Frame(alert_window, padx=20, pady=15)
        body.pack(fill=tk.BOTH, expand=True)

        if self._alert_icon is not None:
            tk.Label(body, image=self._alert_icon).pack(side=tk.LEFT, anchor=tk.N, padx=(0, 15))

        message_label = tk.Label(
            body,
            text=message,
            font=("Arial", 10),
            anchor="w",
            justify=tk.LEFT,
            wraplength=360,
        )
        message_label.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

        ok_button = tk.Button(alert_window, text="OK", command=alert_window.destroy, width=14)
        ok_button.pack(pady=(0, 10))
        ok_button.focus_set()
        alert_window.bind("<Return>", lambda e: alert_window.destroy())

        # Center the alert on the parent window
        alert_window.update_idletasks()
        width = alert_window.winfo_reqwidth()
        height = alert_window.winfo_reqheight()
        center_x = self.root.winfo_x() + (self.root.winfo_width() - width) // 2
        center_y = self.root.winfo_y() + (self.root.winfo_height() - height) // 2
        alert_window.geometry(f"+{max(0, center_x)}+{max(0, center_y)}")

        alert_window.grab_set()
        self.root.wait_window(alert_window)

    def show_about(self):
        about_window = tk.Toplevel(self.root)
        about_window.title(f"{APP_TITLE} - About")
        if self._window_icon is not None:
            about_window.iconphoto(False, self._window_icon)
        tk.Label(about_window, text=about_text(), justify=tk.LEFT, padx=25, pady=25).pack()
        return about_window

    def exit_app(self):
        self.root.destroy()


def main():
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    _enable_dpi_awareness()
    root = tk.Tk()
    SimplePDFMergerApp(root, settings)
    root.mainloop()


if __name__ == "__main__":
    main()
