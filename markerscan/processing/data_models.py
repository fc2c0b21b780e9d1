"""Data models for scan results."""

from pydantic import BaseModel, Field


class RegionResult(BaseModel):
    """One top-level region found in a file."""

    start: int = Field(ge=0, description="Index of the opening marker")
    end: int = Field(ge=0, description="Index of the matching end marker")
    content: str | None = None


class FileScanResult(BaseModel):
    """Regions found in a single input file."""

    path: str
    regions: list[RegionResult] = Field(default_factory=list)
    unterminated: bool = False


class ScanReport(BaseModel):
    """Output of a scan run across all inputs."""

    start_marker: str
    end_marker: str
    files: list[FileScanResult] = Field(default_factory=list)
    elapsed_time: float = Field(0.0, ge=0)

    @property
    def total_regions(self) -> int:
        return sum(len(f.regions) for f in self.files)
