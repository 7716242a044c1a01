import argparse
import logging
import sys
from typing import List, Optional
from config import AnalysisConfig, OutputSettings, settings
from entcheck.features.engine import AnalysisPipeline
from entcheck.features.result_structs import ResultRecord
from entcheck.features.sampling import SamplingMode
from entcheck.features.stats import PValueMethod
from entcheck.utils.exceptions import InputBufferError
from entcheck.utils.report import format_json, format_report, format_table, format_terse, format_terse_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="entcheck",
        description="Measure entropy, chi-square, mean, Monte Carlo pi and serial correlation of a byte stream",
    )
    parser.add_argument("files", nargs="*",
                        help="Files to analyse; '-' or no file reads standard input")
    parser.add_argument("-b", "--bits", action="store_true", default=settings.analysis.mode is SamplingMode.BIT,
                        help="Treat the input as a stream of bits instead of bytes")
    parser.add_argument("-c", "--table", action="store_true", default=settings.output.print_table,
                        help="Print the occurrence count of every value")
    parser.add_argument("-f", "--fold-case", action="store_true", default=settings.analysis.fold_case,
                        help="Fold ASCII upper case letters to lower case before analysis")
    parser.add_argument("-t", "--terse", action="store_true", default=settings.output.terse,
                        help="Terse, comma separated output")
    parser.add_argument("-q", "--quiet", action="store_true", default=not settings.output.print_result,
                        help="Do not print the summary")
    parser.add_argument("--json", action="store_true", default=settings.output.json_output,
                        help="Print the results as JSON")
    parser.add_argument("--p-value-method", choices=[m.value for m in PValueMethod],
                        default=settings.analysis.p_value_method.value,
                        help="How the chi-square statistic is turned into a p-value")
    parser.add_argument("--log-level", type=str.upper, default=settings.log_level,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Logging level for diagnostics on stderr")
    return parser


def render(record: ResultRecord, output: OutputSettings) -> str:
    if output.json_output:
        return format_json(record) + "\n"
    parts = []
    if output.terse:
        if output.print_result:
            parts.append(format_terse(record))
        if output.print_table:
            parts.append(format_terse_table(record))
    else:
        if output.print_table:
            parts.append(format_table(record))
        if output.print_result:
            parts.append(format_report(record))
    return "".join(parts)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    config = AnalysisConfig(
        mode=SamplingMode.BIT if args.bits else SamplingMode.BYTE,
        fold_case=args.fold_case,
        p_value_method=PValueMethod(args.p_value_method),
    )
    output = OutputSettings(
        terse=args.terse,
        print_table=args.table,
        print_result=not args.quiet,
        json_output=args.json,
    )

    pipeline = AnalysisPipeline(config)
    targets = args.files or [None]
    status = 0
    for target in targets:
        name = "stdin" if target in (None, "-") else target
        try:
            record = pipeline.run(target)
        except (InputBufferError, OSError) as e:
            print(f"entcheck: {name}: {e}", file=sys.stderr)
            status = 1
            continue
        if len(targets) > 1 and not (output.terse or output.json_output):
            print(f"==> {name} <==")
        sys.stdout.write(render(record, output))
    return status


if __name__ == "__main__":
    sys.exit(main())
