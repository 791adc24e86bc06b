import time
from pathlib import Path
from typing import Optional

from colorama import Fore, Style


class RunSummary:
    """Collects batch statistics and prints a colorized summary footer."""

    def __init__(self, total_jobs: int, log_path: Optional[Path] = None):
        self.start_time = time.time()
        self.total_jobs = total_jobs
        self.failed_jobs = 0
        self.completed_jobs = 0
        self.lines_in = 0
        self.lines_out = 0
        self.log_path = log_path

    def record_result(self, success: bool, lines_in: int = 0, lines_out: int = 0):
        self.completed_jobs += 1
        if not success:
            self.failed_jobs += 1
            return
        self.lines_in += lines_in
        self.lines_out += lines_out

    @property
    def ok_jobs(self) -> int:
        return self.completed_jobs - self.failed_jobs

    def render(self) -> list[str]:
        end_time = time.time()
        duration = end_time - self.start_time

        sep = Style.BRIGHT + Fore.WHITE
        title = Style.BRIGHT + Fore.CYAN
        status = Fore.GREEN if self.failed_jobs == 0 else Fore.RED
        reset = Style.RESET_ALL
        log_file = self.log_path.resolve() if self.log_path else "-"

        return [
            "",
            f"{sep}{'=' * 78}{reset}",
            f"{title}CLIP SUMMARY{reset}",
            f"{sep}{'=' * 78}{reset}",
            f"Start Time    : {time.strftime('%Y-%m-%d %H:%M:%S', time.localtime(self.start_time))}",
            f"Duration      : {duration:.2f} seconds",
            f"Files Total   : {self.total_jobs}",
            f"Files OK      : {status}{self.ok_jobs}{reset}",
            f"Files Failed  : {status}{self.failed_jobs}{reset}",
            f"Polylines In  : {self.lines_in}",
            f"Polylines Out : {self.lines_out}",
            f"Log File      : {log_file}",
            f"{sep}{'=' * 78}{reset}",
            "",
        ]

    def finalize(self):
        for line in self.render():
            print(line)
