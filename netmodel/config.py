"""Configuration classes for netmodel reports and loaders."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union


@dataclass
class ReportConfig:
    """Input table layout and report file naming."""

    # Report file names, written under the output directory
    utilization_filename: str = "utilization_report.csv"
    wcf_filename: str = "wcf_report.csv"

    # Header row of the utilization report; the WCF report has none
    utilization_header: Tuple[str, str] = ("Link ID", "Utilization")

    # Input tables carry no header row unless configured otherwise
    network_has_header: bool = False
    traffic_has_header: bool = False

    separator: str = ","

    def utilization_path(self, output_dir: Optional[Union[str, Path]] = None) -> Path:
        """Return the utilization report path under output_dir (cwd if None)."""
        return Path(output_dir or ".") / self.utilization_filename

    def wcf_path(self, output_dir: Optional[Union[str, Path]] = None) -> Path:
        """Return the WCF report path under output_dir (cwd if None)."""
        return Path(output_dir or ".") / self.wcf_filename


# Global configuration instance
REPORT_CONFIG = ReportConfig()
