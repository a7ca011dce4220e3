"""
Interactive session: menu-driven region demo.

Flow:
1. Ask for the region variant ('1' = rectangle, anything else = parallelepiped)
2. Read the bounds (re-prompting while a bound is not finite)
3. Print the bound report
4. Read a point of the region's dimension and print the containment result
5. Optionally check a sample Point2D through contains_point()
"""

from typing import Optional

from regionbox_geometry import (
    InvalidBound,
    Point2D,
    Region,
    RegionKind,
    build_region,
    format_number,
)
from regionbox_cli.config import SessionConfig
from regionbox_cli.logging import LogEvent, StructuredLogger, create_logger
from regionbox_cli.reader import NumberReader


class InteractiveSession:
    """
    Console session around one region.

    Attributes:
        reader: Prompting number reader (owns the input/output streams)
        config: Session settings
        region: Region built by the session (None until built)
    """

    def __init__(
        self,
        reader: NumberReader,
        config: Optional[SessionConfig] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        self.reader = reader
        self.config = config or SessionConfig()
        self.logger = logger or create_logger("session", level=self.config.logging_level)
        self.region: Optional[Region] = None

    def choose_kind(self) -> RegionKind:
        self.reader.prompt(
            "Choose mode: enter '1' to work with a Rectangle, "
            "anything else for Parallelepiped:"
        )
        choice = self.reader.read_line().strip()
        return RegionKind.RECTANGLE if choice == "1" else RegionKind.PARALLELEPIPED

    def read_region(self, kind: RegionKind) -> Region:
        """Read bounds until they form a valid region."""
        names = " ".join(f"b{i} a{i}" for i in range(1, kind.dimensions + 1))
        self.reader.prompt(f"Enter {kind.value} bounds ({names}) separated by spaces:")

        while True:
            bounds = self.reader.read_numbers(kind.bound_count)
            try:
                region = build_region(kind, bounds)
            except InvalidBound as e:
                self.logger.warning(
                    event=LogEvent.REGION_BOUNDS_REJECTED,
                    message="Region bounds rejected",
                    metadata={'parameter': e.parameter, 'axis': e.axis},
                    exc_info=e,
                )
                self.reader.prompt(f"{e}. Enter all {kind.bound_count} bounds again:")
                continue

            self.logger.info(
                event=LogEvent.REGION_CREATED,
                message=f"{region.title} created",
                metadata={'bounds': [[a.low, a.high] for a in region.axes]},
            )
            return region

    def print_report(self, region: Region) -> None:
        self.reader.prompt(f"{region.title} bounds:")
        for line in region.format_report():
            self.reader.prompt(f"  {line}")

    def check_point(self, region: Region) -> bool:
        """Read a point matching the region's dimension and report on it."""
        axes = " ".join(f"x{i}" for i in range(1, region.dimensions + 1))
        self.reader.prompt(
            f"Enter a {region.dimensions}D point ({axes}) to check for the "
            f"{region.title.lower()}:"
        )
        coordinates = self.reader.read_numbers(region.dimensions)
        inside = region.contains(coordinates)

        self.logger.info(
            event=LogEvent.QUERY_EVALUATED,
            message="Point checked",
            metadata={'coordinates': coordinates, 'inside': inside},
        )

        if inside:
            self.reader.prompt(f"Point belongs to the {region.title.lower()}.")
        else:
            self.reader.prompt(f"Point does NOT belong to the {region.title.lower()}")
        return inside

    def check_sample_point(self, region: Region) -> bool:
        """Check (b1, 0) for a parallelepiped or (0, 0) for a rectangle."""
        x = region.axis1.low if region.kind is RegionKind.PARALLELEPIPED else 0.0
        sample = Point2D(x, 0.0)
        inside = region.contains_point(sample)
        self.reader.prompt(
            "Demonstrating call to contains_point(Point2D) on the same region:"
        )
        self.reader.prompt(
            f"Sample point ({format_number(sample.x)}, {format_number(sample.y)}) "
            f"belongs: {inside}"
        )
        return inside

    def run(self) -> Region:
        """
        Run the full interactive flow.

        Returns:
            The region that was built

        Raises:
            InputExhausted: If input ends before the flow completes
        """
        self.reader.prompt("Rectangle and Parallelepiped demo with virtual methods\n")

        kind = self.choose_kind()
        self.region = self.read_region(kind)

        self.reader.prompt()
        self.print_report(self.region)
        self.reader.prompt()

        self.check_point(self.region)

        if self.config.show_sample_point:
            self.reader.prompt()
            self.check_sample_point(self.region)

        return self.region
