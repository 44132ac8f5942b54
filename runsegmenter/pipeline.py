"""Batch pipeline: segment every record of an input file into runs."""

import json
import logging
import re
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Iterator, Optional

import pandas as pd
from tqdm import tqdm

from .config import Config
from .models import RunRecord
from .segmenters import RunSegmenter

logger = logging.getLogger(__name__)


# Regex pattern for illegal control characters (except tab, newline, carriage return)
ILLEGAL_CHARS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f]')

OUTPUT_COLUMNS = [
    "Source_ID",
    "Source_Line_Number",
    "Run_Order",
    "Start_Index",
    "End_Index",
    "Length",
    "Script",
    "Presentation_Style",
    "Run_Text",
]


def sanitize_text(text: str) -> str:
    """Remove control characters that may interfere with CSV/Excel.

    Args:
        text: Input text

    Returns:
        Sanitized text
    """
    if not text:
        return text
    return ILLEGAL_CHARS.sub('', text)


def segment_record(
    text: str, source_id: str, line_number: int, include_text: bool = True
) -> list[RunRecord]:
    """Segment one record's text into run records.

    Args:
        text: Record text
        source_id: Identifier of the record
        line_number: Line number of the record in its input file
        include_text: Whether to keep each run's text

    Returns:
        List of RunRecords in run order
    """
    records = []
    for order, segment in enumerate(RunSegmenter(text), 1):
        records.append(
            RunRecord(
                text=segment.slice(text) if include_text else None,
                source_id=source_id,
                source_line_number=line_number,
                run_order=order,
                start_index=segment.start,
                end_index=segment.end,
                script=segment.script.value,
                presentation_style=segment.presentation_style.value,
            )
        )
    return records


def _process_record_worker(args: tuple) -> tuple[int, list[dict]]:
    """Worker for parallel processing. Must be module-level for pickling.

    Args:
        args: (line_num, text, source_id, include_text)

    Returns:
        (line_num, list of row dicts)
    """
    line_num, text, source_id, include_text = args
    records = segment_record(text, source_id, line_num, include_text)
    return line_num, [record.to_row() for record in records]


class SegmentationPipeline:
    """Pipeline for segmenting text files into script/presentation runs."""

    def __init__(self, config: Config):
        """Initialize segmentation pipeline.

        Args:
            config: Pipeline configuration
        """
        self.config = config

    def process_text(
        self, text: str, source_id: str = "", line_number: int = 0
    ) -> list[RunRecord]:
        """Process a single text.

        Args:
            text: Input text content
            source_id: Identifier of the record
            line_number: Line number of the record

        Returns:
            List of RunRecords
        """
        return segment_record(
            text, source_id, line_number, self.config.output.include_text
        )

    def read_records(self, input_path: Path) -> Iterator[tuple[int, str, str]]:
        """Yield (line_num, source_id, text) for each usable input record.

        Malformed JSONL lines are logged and skipped.
        """
        seg = self.config.segmentation
        with open(input_path, "r", encoding="utf-8") as infile:
            for line_num, line in enumerate(infile, 1):
                line = line.rstrip("\r\n")
                if self.config.input_format == "text":
                    source_id = input_path.stem
                    text = line
                else:
                    if not line.strip():
                        continue
                    try:
                        record = json.loads(line)
                    except json.JSONDecodeError as e:
                        logger.warning("Skipping line %d: invalid JSON (%s)", line_num, e)
                        continue
                    if not isinstance(record, dict):
                        logger.warning("Skipping line %d: not a JSON object", line_num)
                        continue
                    text = record.get(seg.text_field)
                    if not isinstance(text, str):
                        logger.warning(
                            "Skipping line %d: no string field %r", line_num, seg.text_field
                        )
                        continue
                    source_id = str(record.get(seg.id_field, f"line_{line_num}"))
                if seg.skip_empty and not text:
                    continue
                yield line_num, source_id, text

    def _process_file_sequential(self, input_path: Path) -> dict[int, list[dict]]:
        """Process file in this process."""
        results_by_line = {}
        for line_num, source_id, text in tqdm(
            self.read_records(input_path), desc="Segmenting runs"
        ):
            records = self.process_text(text, source_id, line_num)
            results_by_line[line_num] = [record.to_row() for record in records]
        return results_by_line

    def _process_file_parallel(self, input_path: Path) -> dict[int, list[dict]]:
        """Process file using multiple worker processes."""
        workers = self.config.segmentation.workers
        include_text = self.config.output.include_text
        tasks = [
            (line_num, text, source_id, include_text)
            for line_num, source_id, text in self.read_records(input_path)
        ]

        results_by_line = {}
        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(_process_record_worker, task): task[0]
                for task in tasks
            }
            for future in tqdm(
                as_completed(futures), total=len(tasks),
                desc=f"Segmenting runs ({workers} workers)",
            ):
                line_num = futures[future]
                _, rows = future.result()
                results_by_line[line_num] = rows
        return results_by_line

    def to_dataframe(self, results_by_line: dict[int, list[dict]]) -> pd.DataFrame:
        """Collect rows in input order into one table."""
        rows = []
        for line_num in sorted(results_by_line):
            rows.extend(results_by_line[line_num])
        columns = [
            col for col in OUTPUT_COLUMNS
            if col != "Run_Text" or self.config.output.include_text
        ]
        df = pd.DataFrame(rows, columns=columns)
        for col in df.select_dtypes(include=["object"]).columns:
            df[col] = df[col].apply(
                lambda x: sanitize_text(x) if isinstance(x, str) else x
            )
        return df

    def _save(self, df: pd.DataFrame) -> Path:
        output_path = self.config.output_path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output_path, sep=self.config.output.separator, index=False)
        logger.info("Saved %d runs to %s", len(df), output_path)
        return output_path

    def process_file(self, input_path: Path) -> int:
        """Segment an input file and write its runs.

        Args:
            input_path: Path to input JSONL or text file

        Returns:
            Number of records processed
        """
        logger.info("Reading from: %s", input_path)
        if self.config.segmentation.workers <= 1:
            results_by_line = self._process_file_sequential(input_path)
        else:
            results_by_line = self._process_file_parallel(input_path)

        self._save(self.to_dataframe(results_by_line))
        return len(results_by_line)

    def run(self) -> int:
        """Run the segmentation pipeline.

        Returns:
            Number of records processed
        """
        if not self.config.input_file:
            raise ValueError("Input file not specified in configuration")

        if not self.config.input_file.exists():
            raise FileNotFoundError(f"Input file not found: {self.config.input_file}")

        return self.process_file(self.config.input_file)


def run_pipeline(config: Config, input_file: Optional[Path] = None) -> int:
    """Convenience wrapper: run the pipeline, optionally overriding the input file."""
    if input_file is not None:
        config = config.model_copy(update={"input_file": Path(input_file)})
    return SegmentationPipeline(config).run()
