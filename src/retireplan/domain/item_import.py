"""CSV import of financial items."""

import csv
import logging
from pathlib import Path

from retireplan.domain.entities import (
    FinancialCategory,
    FinancialItem,
    Frequency,
    ItemImportResult,
    Owner,
)
from retireplan.domain.errors import ValidationError, missing_columns
from retireplan.utils.amount_parser import parse_amount

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = {"category", "amount"}
OPTIONAL_COLUMNS = {"frequency", "owner", "name"}


class ItemImportService:
    """Service for reading financial items from CSV files."""

    def __init__(self, default_frequency: Frequency = Frequency.MONTHLY):
        """Initialize item import service.

        Args:
            default_frequency: Frequency used when a row leaves it blank
        """
        self.default_frequency = default_frequency

    def import_csv(self, csv_file_path: str) -> ItemImportResult:
        """Import financial items from a CSV file.

        Column names are matched case-insensitively. Rows that fail to parse
        are skipped and reported; the rest are returned.

        Args:
            csv_file_path: Path to CSV file

        Returns:
            ItemImportResult with parsed items and per-row error messages

        Raises:
            ValidationError: If the file has no header or lacks required columns
            FileNotFoundError: If CSV file doesn't exist
        """
        csv_path = Path(csv_file_path)
        if not csv_path.exists():
            raise FileNotFoundError(f"CSV file not found: {csv_file_path}")

        items = []
        errors = []

        with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
            # Try to detect delimiter
            sample = f.read(1024)
            f.seek(0)
            try:
                delimiter = csv.Sniffer().sniff(sample, delimiters=",;\t|").delimiter
            except csv.Error:
                delimiter = ","

            reader = csv.DictReader(f, delimiter=delimiter)
            if not reader.fieldnames:
                raise ValidationError("CSV file has no columns")

            column_map = {name.strip().lower(): name for name in reader.fieldnames if name}
            missing = REQUIRED_COLUMNS - set(column_map)
            if missing:
                raise ValidationError(missing_columns(missing))

            for row_num, row in enumerate(reader, start=2):  # Start at 2 (header is row 1)
                values = {
                    field: (row.get(column_map[field]) or "").strip()
                    for field in REQUIRED_COLUMNS | OPTIONAL_COLUMNS
                    if field in column_map
                }
                if not any(values.values()):
                    continue

                try:
                    items.append(self.parse_row(values))
                except ValueError as e:
                    errors.append(f"Row {row_num}: {e}")

        logger.debug(
            "Imported %d items from %s (%d rows rejected)", len(items), csv_path, len(errors)
        )
        return ItemImportResult(items=tuple(items), errors=tuple(errors))

    def parse_row(self, values: dict[str, str]) -> FinancialItem:
        """Build a FinancialItem from one row of stripped column values.

        Raises:
            ValueError: If a value is missing or invalid
        """
        if not values.get("category"):
            raise ValidationError("Missing category")
        if not values.get("amount"):
            raise ValidationError("Missing amount")

        category = FinancialCategory.parse(values["category"])
        amount = parse_amount(values["amount"])

        frequency = self.default_frequency
        if values.get("frequency"):
            frequency = Frequency.parse(values["frequency"])

        owner = Owner.parse(values["owner"]) if values.get("owner") else None

        return FinancialItem(
            category=category,
            amount=amount,
            frequency=frequency,
            owner=owner,
            name=values.get("name") or None,
        )
