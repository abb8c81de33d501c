"""
Pipeline Orchestrator: Manages the execution flow of vcfstream.

This module handles:
1. Opening the TSV outputs before any work starts.
2. Parsing the VCF on a producer thread into two bounded sinks.
3. Draining rejected lines on a consumer thread and variants on the calling thread.
4. Re-raising the first failure of any of the three once every thread is done.
"""

import logging
import threading
from collections.abc import Iterable
from contextlib import ExitStack
from dataclasses import dataclass

from .io.input import to_sinks
from .io.output import InvalidLineWriter, OutputWriter, VariantTsvWriter
from .io.sinks import QueueSink
from .models.core import InvalidLine, ParserConfig, Variant
from .utils.logging import console, timed

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Counts of one pipeline run."""

    valid: int = 0
    invalid: int = 0


class Pipeline:
    def __init__(self, config: ParserConfig):
        self.config = config
        self.console = console

    def run(self) -> PipelineResult:
        """
        Execute the pipeline.

        Raises:
            HeaderNotFoundError: If the input has no column header.
            OSError: If the input cannot be read or an output cannot be written.
        """
        output: QueueSink[Variant] = QueueSink(maxsize=self.config.queue_size)
        invalids: QueueSink[InvalidLine] = QueueSink(maxsize=self.config.queue_size)
        errors: list[BaseException] = []
        result = PipelineResult()

        with ExitStack() as stack:
            variant_writer = invalid_writer = None
            if self.config.output_file:
                variant_writer = stack.enter_context(VariantTsvWriter(self.config.output_file))
            if self.config.invalid_file:
                invalid_writer = stack.enter_context(InvalidLineWriter(self.config.invalid_file))

            def produce() -> None:
                try:
                    to_sinks(self.config.variant_file, output, invalids)
                except BaseException as e:
                    errors.append(e)

            def consume_invalids() -> None:
                result.invalid = drain(invalids, invalid_writer, errors)

            producer = threading.Thread(target=produce, name="vcfstream-parser", daemon=True)
            invalid_consumer = threading.Thread(
                target=consume_invalids, name="vcfstream-invalids", daemon=True
            )

            logger.info("Parsing %s", self.config.variant_file)
            with timed(f"Parsing {self.config.variant_file}", logger) as timer:
                producer.start()
                invalid_consumer.start()
                with self.console.status("[bold green]Parsing variants...[/bold green]"):
                    result.valid = drain(output, variant_writer, errors)
                producer.join()
                invalid_consumer.join()

        if errors:
            raise errors[0]

        logger.info(
            "Parsed %d variants, %d invalid lines in %.2fs",
            result.valid,
            result.invalid,
            timer.elapsed,
        )
        return result


def drain(
    sink: Iterable[Variant] | Iterable[InvalidLine],
    writer: OutputWriter | None,
    errors: list[BaseException],
) -> int:
    """
    Consume ``sink`` until it is closed and return the number of items.

    A failing writer is recorded in ``errors`` and dropped; the remaining items
    are still consumed so the producer is never left blocked on a full sink.
    """
    count = 0
    for item in sink:
        count += 1
        if writer is None:
            continue
        try:
            writer.write(item)
        except Exception as e:
            logger.debug("Writer %s failed, discarding the rest of its stream", type(writer).__name__)
            errors.append(e)
            writer = None
    return count
