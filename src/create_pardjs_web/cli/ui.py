"""Step tracking rendered as a Rich tree."""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from rich.tree import Tree

STATUS_SYMBOLS = {
    "pending": "[green dim]○[/green dim]",
    "running": "[cyan]○[/cyan]",
    "done": "[green]●[/green]",
    "error": "[red]●[/red]",
    "skipped": "[yellow]○[/yellow]",
}


class StepTracker:
    """Track scaffolding steps and render them with Rich."""

    def __init__(self, title: str):
        self.title = title
        self.steps: List[Dict[str, str]] = []  # {key, label, status, detail}
        self._refresh_cb: Optional[Callable[[], None]] = None

    def attach_refresh(self, cb: Callable[[], None]) -> None:
        self._refresh_cb = cb

    def add(self, key: str, label: str) -> None:
        if self.get(key) is None:
            self.steps.append({"key": key, "label": label, "status": "pending", "detail": ""})
            self._maybe_refresh()

    def get(self, key: str) -> Optional[Dict[str, str]]:
        for step in self.steps:
            if step["key"] == key:
                return step
        return None

    def status_of(self, key: str) -> Optional[str]:
        step = self.get(key)
        return step["status"] if step else None

    def start(self, key: str, detail: str = "") -> None:
        self._update(key, status="running", detail=detail)

    def complete(self, key: str, detail: str = "") -> None:
        self._update(key, status="done", detail=detail)

    def error(self, key: str, detail: str = "") -> None:
        self._update(key, status="error", detail=detail)

    def skip(self, key: str, detail: str = "") -> None:
        self._update(key, status="skipped", detail=detail)

    def _update(self, key: str, status: str, detail: str) -> None:
        step = self.get(key)
        if step is None:
            step = {"key": key, "label": key, "status": status, "detail": detail}
            self.steps.append(step)
        step["status"] = status
        if detail:
            step["detail"] = detail
        self._maybe_refresh()

    def _maybe_refresh(self) -> None:
        if self._refresh_cb:
            self._refresh_cb()

    def render(self) -> Tree:
        tree = Tree(f"[cyan]{self.title}[/cyan]", guide_style="grey50")
        for step in self.steps:
            symbol = STATUS_SYMBOLS.get(step["status"], " ")
            label = step["label"]
            detail = step["detail"].strip()
            if step["status"] == "pending":
                suffix = f" ({detail})" if detail else ""
                tree.add(f"{symbol} [bright_black]{label}{suffix}[/bright_black]")
            elif detail:
                tree.add(f"{symbol} [white]{label}[/white] [bright_black]({detail})[/bright_black]")
            else:
                tree.add(f"{symbol} [white]{label}[/white]")
        return tree


__all__ = ["StepTracker"]
