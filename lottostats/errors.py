"""Error taxonomy for draw ingestion."""


class LotteryDataError(Exception):
    """Base class for every error raised while ingesting draw files."""


class MalformedFileError(LotteryDataError):
    """The file bytes could not be decoded into a grid of cells."""

    def __init__(self, file_name, reason=""):
        self.file_name = file_name
        self.reason = reason
        msg = f"Could not read file '{file_name}'"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class HeaderNotFoundError(LotteryDataError):
    """No row in the scanned window looks like a usable header."""

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(
            "Could not find the header row. Missing columns: "
            + ", ".join(self.missing)
        )


class FileProcessingError(LotteryDataError):
    """A file-level error, tagged with the file it came from."""

    def __init__(self, file_name, cause):
        self.file_name = file_name
        self.cause = cause
        super().__init__(f"Error processing file '{file_name}': {cause}")


class NoValidDrawsError(LotteryDataError):
    """Nothing survived extraction and merging across the whole batch."""

    def __init__(self, draw_size, total_numbers):
        self.draw_size = draw_size
        self.total_numbers = total_numbers
        super().__init__(
            "No valid draws found in the given files. Check that the files contain "
            f"rows with a valid date and {draw_size} valid numbers between 1 and "
            f"{total_numbers}."
        )
