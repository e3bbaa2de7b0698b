import tkinter as tk
from tkinter import filedialog, messagebox
import logging
import threading
import queue
from datetime import date
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from tracker.core.interfaces import TransactionView
from tracker.core.models import ChartData, Transaction
from tracker.services.exporter import ExporterService
from tracker.services.transaction_client import TransactionClient
from tracker.services.transaction_manager import TransactionManager
from tracker.ui.chart import MatplotlibBarChart
from tracker.ui.toast import TkToastNotifier
from tracker.core.exceptions import TransportError

logger = logging.getLogger(__name__)

class AppGUI(TransactionView):
    def __init__(self, root, client=None):
        self.root = root
        self.root.title("Transaction Tracker")
        self.root.geometry("1000x600")

        self.queue = queue.Queue()
        self._check_queue()

        self.client = client or TransactionClient()
        self.exporter = ExporterService(self.client)
        self.rows = {}

        self._init_ui()

        self.manager = TransactionManager(
            self.client,
            view=self,
            notifier=TkToastNotifier(self.root),
            chart_factory=self._create_chart,
            dispatch=self.run_on_ui,
        )

        self._start(self.manager.load_transactions)

    def _check_queue(self):
        """Check the queue for tasks to run on the main thread."""
        try:
            while True:
                task = self.queue.get_nowait()
                func = task[0]
                args = task[1:]
                func(*args)
        except queue.Empty:
            pass
        finally:
            self.root.after(100, self._check_queue)

    def run_on_ui(self, func, *args):
        self.queue.put((func, *args))

    def _start(self, target, *args):
        threading.Thread(target=target, args=args, daemon=True).start()

    def _init_ui(self):
        main_frame = tk.Frame(self.root, padx=20, pady=20)
        main_frame.pack(fill=tk.BOTH, expand=True)

        left = tk.Frame(main_frame)
        left.pack(side=tk.LEFT, fill=tk.Y)

        # Form
        form = tk.LabelFrame(left, text="New transaction", padx=10, pady=10)
        form.pack(fill=tk.X)

        self.description_var = tk.StringVar()
        self.amount_var = tk.StringVar()
        self.date_var = tk.StringVar(value=date.today().isoformat())

        for row, (text, var) in enumerate((
            ("Description", self.description_var),
            ("Amount", self.amount_var),
            ("Date (YYYY-MM-DD)", self.date_var),
        )):
            tk.Label(form, text=text).grid(row=row, column=0, sticky="w", pady=2)
            tk.Entry(form, textvariable=var, width=28).grid(row=row, column=1, pady=2)

        tk.Button(form, text="Add", command=self.on_submit).grid(row=3, column=1, sticky="e", pady=(8, 0))

        # Transaction list
        list_frame = tk.LabelFrame(left, text="Transactions", padx=5, pady=5)
        list_frame.pack(fill=tk.BOTH, expand=True, pady=10)

        canvas = tk.Canvas(list_frame, width=380, highlightthickness=0)
        scrollbar = tk.Scrollbar(list_frame, orient=tk.VERTICAL, command=canvas.yview)
        self.list_container = tk.Frame(canvas)
        self.list_container.bind("<Configure>", lambda e: canvas.configure(scrollregion=canvas.bbox("all")))
        canvas.create_window((0, 0), window=self.list_container, anchor="nw")
        canvas.configure(yscrollcommand=scrollbar.set)
        canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)

        # Export buttons
        export_frame = tk.Frame(left)
        export_frame.pack(fill=tk.X)

        tk.Button(export_frame, text="Download Excel", command=self.on_download_excel).pack(side=tk.LEFT, padx=5)
        tk.Button(export_frame, text="Export CSV", command=self.on_export).pack(side=tk.LEFT, padx=5)
        tk.Button(export_frame, text="Export monthly totals", command=self.on_export_totals).pack(side=tk.LEFT, padx=5)

        self.status_label = tk.Label(left, text="Ready.", fg="blue")
        self.status_label.pack(pady=(10, 0))

        # Chart
        self.chart_frame = tk.Frame(main_frame)
        self.chart_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(20, 0))

    def _create_chart(self, data: ChartData) -> MatplotlibBarChart:
        figure = Figure(figsize=(6, 4))
        canvas = FigureCanvasTkAgg(figure, master=self.chart_frame)
        canvas.get_tk_widget().pack(fill=tk.BOTH, expand=True)
        return MatplotlibBarChart(figure, data.labels, data.amounts, redraw=canvas.draw)

    # TransactionView, always called on the main thread

    def add_transaction(self, transaction: Transaction) -> None:
        row = tk.Frame(self.list_container)
        row.pack(fill=tk.X, pady=1)
        tk.Label(row, text=transaction.display_text(), anchor="w").pack(side=tk.LEFT, fill=tk.X, expand=True)
        tk.Button(row, text="Delete", command=lambda: self.on_delete(transaction)).pack(side=tk.RIGHT)
        self.rows[transaction.id] = row

    def remove_transaction(self, transaction: Transaction) -> None:
        row = self.rows.pop(transaction.id, None)
        if row is not None:
            row.destroy()

    def reset_form(self) -> None:
        self.description_var.set("")
        self.amount_var.set("")
        self.date_var.set(date.today().isoformat())

    def update_status(self, text, color="black"):
        """Thread-safe status update."""
        self.run_on_ui(self._update_status_internal, text, color)

    def _update_status_internal(self, text, color):
        self.status_label.config(text=text, fg=color)

    # Event handlers

    def on_submit(self):
        try:
            draft = Transaction.draft(self.description_var.get(), self.amount_var.get(), self.date_var.get())
        except ValueError as e:
            messagebox.showwarning("Invalid date", str(e))
            return
        self._start(self.manager.add_transaction, draft)

    def on_delete(self, transaction: Transaction):
        self._start(self.manager.delete_transaction, transaction)

    def on_download_excel(self):
        file_path = filedialog.asksaveasfilename(defaultextension=".xlsx", filetypes=[("Excel", "*.xlsx")])
        if not file_path: return

        self._start(self.download_excel_thread, file_path)

    def download_excel_thread(self, file_path):
        self.update_status("Downloading...", "orange")
        try:
            self.client.download_excel(file_path)
            self.update_status(f"Saved to {file_path}", "green")
        except TransportError as e:
            logger.error(f"Error downloading excel: {e}")
            self.update_status("Download failed.", "red")

    def on_export(self):
        file_path = filedialog.asksaveasfilename(defaultextension=".csv", filetypes=[("CSV", "*.csv"), ("Excel", "*.xlsx")])
        if not file_path: return

        self._start(self.export_thread, self.exporter.export_transactions, file_path)

    def on_export_totals(self):
        file_path = filedialog.asksaveasfilename(defaultextension=".csv", filetypes=[("CSV", "*.csv"), ("Excel", "*.xlsx")], initialfile="monthly_totals.csv")
        if not file_path: return

        self._start(self.export_thread, self.exporter.export_monthly_totals, file_path)

    def export_thread(self, export, file_path):
        self.update_status("Exporting...", "orange")
        if export(file_path):
            self.update_status(f"Exported to {file_path}", "green")
        else:
            self.update_status("Export failed.", "red")

def create_main_window():
    root = tk.Tk()
    AppGUI(root)
    return root
