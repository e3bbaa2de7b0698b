from typing import Callable, List, Optional, Sequence
from matplotlib.figure import Figure
from tracker.core.interfaces import ChartWidget

BAR_COLOR = (54 / 255, 162 / 255, 235 / 255, 0.2)
BAR_EDGE_COLOR = (54 / 255, 162 / 255, 235 / 255, 1.0)


class MatplotlibBarChart(ChartWidget):
    """
    Monthly bar chart drawn on a matplotlib Figure.
    `redraw` is called after every change; the GUI passes the Tk canvas draw.
    """

    def __init__(
        self,
        figure: Figure,
        labels: Sequence[str],
        amounts: Sequence[float],
        redraw: Optional[Callable[[], None]] = None,
        dataset_label: str = "Amount",
    ):
        self.figure = figure
        self.ax = figure.add_subplot(111)
        self.dataset_label = dataset_label
        self.redraw = redraw or figure.canvas.draw_idle
        self.labels: List[str] = []
        self.amounts: List[float] = []
        self.update(labels, amounts)

    def update(self, labels: Sequence[str], amounts: Sequence[float]) -> None:
        self.labels = list(labels)
        self.amounts = list(amounts)
        self._draw()
        self.redraw()

    def _draw(self):
        self.ax.clear()
        positions = range(len(self.labels))
        self.ax.bar(
            positions,
            self.amounts,
            color=BAR_COLOR,
            edgecolor=BAR_EDGE_COLOR,
            linewidth=1,
            label=self.dataset_label,
        )
        self.ax.set_xticks(list(positions))
        self.ax.set_xticklabels(self.labels)

        # y axis always starts at zero
        bottom = min([0.0, *self.amounts])
        top = max([0.0, *self.amounts])
        if top == bottom:
            top = bottom + 1
        self.ax.set_ylim(bottom=bottom, top=top * 1.05 if top > 0 else top)

        if self.labels:
            self.ax.legend(loc="upper left")
        self.figure.tight_layout()
