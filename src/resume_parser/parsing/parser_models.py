"""Layout models shared by the extraction, line and section stages."""

from collections import Counter

from pydantic import BaseModel, ConfigDict, Field


class TextFragment(BaseModel):
    """A positioned run of text on a PDF page.

    Coordinates are page-relative points with y increasing downward;
    ``y`` is the top edge of the run.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    x: float
    y: float
    width: float
    height: float
    font_name: str = ""
    font_size: float
    is_bold: bool = False
    page_number: int = 1

    @property
    def x_end(self) -> float:
        return self.x + self.width

    @property
    def y_center(self) -> float:
        return self.y + self.height / 2


class Line(BaseModel):
    """Fragments on one visual row, ordered left to right."""

    model_config = ConfigDict(frozen=True)

    fragments: tuple[TextFragment, ...] = Field(min_length=1)
    text: str

    @property
    def page_number(self) -> int:
        return self.fragments[0].page_number

    @property
    def x(self) -> float:
        return min(f.x for f in self.fragments)

    @property
    def x_end(self) -> float:
        return max(f.x_end for f in self.fragments)

    @property
    def y(self) -> float:
        return min(f.y for f in self.fragments)

    @property
    def font_size(self) -> float:
        """Font size covering the most characters (first seen wins ties)."""
        sizes: Counter[float] = Counter()
        for fragment in self.fragments:
            sizes[fragment.font_size] += max(len(fragment.text.strip()), 1)
        return sizes.most_common(1)[0][0]

    @property
    def is_bold(self) -> bool:
        bold = sum(len(f.text.strip()) for f in self.fragments if f.is_bold)
        total = sum(len(f.text.strip()) for f in self.fragments)
        return total > 0 and bold * 2 >= total

    @property
    def leads_bold(self) -> bool:
        return self.fragments[0].is_bold


class Section(BaseModel):
    """A run of lines under one heading."""

    name: str
    heading: Line | None = None
    lines: list[Line] = Field(default_factory=list)


class SectionMap(BaseModel):
    """Document lines partitioned into canonical sections, in document order."""

    sections: list[Section] = Field(default_factory=list)

    def names(self) -> list[str]:
        """Section names in order of first occurrence."""
        return list(dict.fromkeys(s.name for s in self.sections))

    def lines_for(self, name: str) -> list[Line]:
        """Body lines of every section with this name, headings excluded."""
        return [line for s in self.sections if s.name == name for line in s.lines]

    def to_mapping(self) -> dict[str, list[Line]]:
        """Section name to all of its lines, headings included."""
        mapping: dict[str, list[Line]] = {}
        for section in self.sections:
            bucket = mapping.setdefault(section.name, [])
            if section.heading is not None:
                bucket.append(section.heading)
            bucket.extend(section.lines)
        return mapping

    def all_lines(self) -> list[Line]:
        """Every line in document order."""
        result: list[Line] = []
        for section in self.sections:
            if section.heading is not None:
                result.append(section.heading)
            result.extend(section.lines)
        return result
