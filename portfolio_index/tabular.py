"""Reader and writer for the hand-edited product spreadsheet (CSV export).

The format is plain delimited text with the usual quoting rules:

  * a field that starts with the quote character runs until the next lone
    quote, and may contain delimiters, line breaks and doubled quotes;
  * outside quotes the delimiter ends a field and LF, CRLF or CR ends a row;
  * unquoted values are trimmed, quoted values are kept exactly.

The first row is the header. Blank lines are skipped, short rows are padded
with empty strings and anything with fewer than two rows yields no records.
"""

BOM = "\ufeff"


class RowScanner:
    """Single-pass character scanner that splits text into rows of fields."""

    def __init__(self, delimiter: str = ",", quote: str = '"'):
        if len(delimiter) != 1 or len(quote) != 1:
            raise ValueError("delimiter and quote must be single characters")
        if delimiter == quote:
            raise ValueError("delimiter and quote must differ")
        self.delimiter = delimiter
        self.quote = quote
        self.rows: list[list[str]] = []
        self._row: list[str] = []
        self._buf: list[str] = []
        self._in_quotes = False
        self._quoted = False
        self._has_content = False

    # ---- field/row boundaries ----
    def _end_field(self):
        value = "".join(self._buf)
        self._row.append(value if self._quoted else value.strip())
        self._buf = []
        self._quoted = False

    def _end_row(self):
        self._end_field()
        if self._has_content:
            self.rows.append(self._row)
        self._row = []
        self._has_content = False

    def _opens_quote(self) -> bool:
        # Only at the start of a field, ignoring leading whitespace.
        return not self._quoted and not "".join(self._buf).strip()

    # ---- scanning ----
    def feed(self, text: str) -> list[list[str]]:
        quote, delimiter = self.quote, self.delimiter
        i, n = 0, len(text)
        while i < n:
            ch = text[i]
            if self._in_quotes:
                if ch == quote:
                    if i + 1 < n and text[i + 1] == quote:
                        self._buf.append(quote)
                        i += 1
                    else:
                        self._in_quotes = False
                else:
                    self._buf.append(ch)
            elif ch == quote and self._opens_quote():
                self._buf = []
                self._in_quotes = True
                self._quoted = True
                self._has_content = True
            elif ch == delimiter:
                self._has_content = True
                self._end_field()
            elif ch == "\r":
                if i + 1 < n and text[i + 1] == "\n":
                    i += 1
                self._end_row()
            elif ch == "\n":
                self._end_row()
            else:
                if not ch.isspace():
                    self._has_content = True
                self._buf.append(ch)
            i += 1
        return self.rows

    def close(self) -> list[list[str]]:
        """Flush a final row that has no terminating line break."""
        if self._has_content or self._buf or self._row:
            self._end_row()
        self._in_quotes = False
        return self.rows


def parse_rows(text: str, delimiter: str = ",", quote: str = '"') -> list[list[str]]:
    scanner = RowScanner(delimiter, quote)
    scanner.feed(text[1:] if text.startswith(BOM) else text)
    return scanner.close()


def parse_records(text: str, delimiter: str = ",", quote: str = '"') -> list[dict[str, str]]:
    """Parse tabular text into header-keyed records."""
    rows = parse_rows(text, delimiter, quote)
    if len(rows) < 2:
        return []

    headers = [h.strip() for h in rows[0]]
    records = []
    for row in rows[1:]:
        record = {}
        for idx, name in enumerate(headers):
            if not name:
                continue
            record[name] = row[idx] if idx < len(row) else ""
        records.append(record)
    return records


def format_field(value, delimiter: str = ",", quote: str = '"') -> str:
    text = "" if value is None else str(value)
    needs_quotes = (
        delimiter in text
        or quote in text
        or "\n" in text
        or "\r" in text
        or text != text.strip()
    )
    if needs_quotes:
        return quote + text.replace(quote, quote * 2) + quote
    return text


def format_records(records: list[dict], columns, delimiter: str = ",", quote: str = '"') -> str:
    """Serialise records under a fixed header; the inverse of parse_records."""
    lines = [delimiter.join(format_field(c, delimiter, quote) for c in columns)]
    for record in records:
        line = delimiter.join(format_field(record.get(c, ""), delimiter, quote) for c in columns)
        # A blank line would be skipped on read; keep the row with an empty quoted field.
        lines.append(line or quote * 2)
    return "\n".join(lines) + "\n"
