import json
from entcheck.features.result_structs import ResultRecord, is_defined
from entcheck.features.sampling import SamplingMode

TERSE_SUMMARY_HEADER = "0,File-{unit}s,Entropy,Chi-square,Mean,Monte-Carlo-Pi,Serial-Correlation"
TERSE_TABLE_HEADER = "2,Value,Occurrences,Fraction"


def _describe_p_value(p_value) -> str:
    if not is_defined(p_value):
        return f"would exceed this value an undetermined percentage of the times ({p_value.reason})."
    if p_value < 0.0001:
        return "would exceed this value less than 0.01 percent of the times."
    if p_value > 0.9999:
        return "would exceed this value more than 99.99 percent of the times."
    return f"would exceed this value {p_value * 100:f} percent of the times."


def format_report(record: ResultRecord) -> str:
    unit = record.mode.unit
    lines = [
        f"Entropy = {record.entropy:f} bits per {unit}.",
        "",
        "Optimum compression would reduce the size",
        f"of this {record.sample_count} {unit} file by {int(record.compression)} percent.",
        "",
        f"Chi square distribution for {record.sample_count} samples is {record.chisquare:f}, and randomly",
        _describe_p_value(record.p_value),
        "",
        f"Arithmetic mean value of data bytes is {record.mean:f} ({record.mode.reference_mean:f} = random).",
        f"Monte Carlo value for Pi is {record.pi_estimate:f} (error {record.pi_error:f} percent).",
    ]
    if is_defined(record.serial_correlation):
        lines.append(f"Serial correlation coefficient is {record.serial_correlation:f} (totally uncorrelated = 0.0).")
    else:
        lines.append(f"Serial correlation coefficient is undefined ({record.serial_correlation.reason}).")
    return "\n".join(lines) + "\n"


def format_table(record: ResultRecord) -> str:
    frame = record.frequencies.to_frame()
    lines = []
    for row in frame.itertuples(index=False):
        if record.mode is SamplingMode.BIT:
            lines.append(f"Value: {row.Value} Occurrences: {row.Occurrences} Fraction: {row.Fraction:g}")
        else:
            char = chr(row.Value) if 32 <= row.Value < 127 else " "
            lines.append(f"Value: {row.Value} Char: {char} Occurrences: {row.Occurrences} Fraction: {row.Fraction:g}")
    lines.append("")
    lines.append(f"Total: {record.byte_count} 1.0")
    return "\n".join(lines) + "\n\n"


def _terse_field(value) -> str:
    return f"{value:g}" if is_defined(value) else ""


def format_terse(record: ResultRecord) -> str:
    values = [record.entropy, record.chisquare, record.mean, record.pi_estimate, record.serial_correlation]
    header = TERSE_SUMMARY_HEADER.format(unit=record.mode.unit)
    return f"{header}\n1,{record.sample_count}," + ",".join(_terse_field(v) for v in values) + "\n"


def format_terse_table(record: ResultRecord) -> str:
    lines = [TERSE_TABLE_HEADER]
    for value, count, fraction in record.frequencies.rows():
        lines.append(f"3,{value},{count},{fraction:g}")
    return "\n".join(lines) + "\n"


def format_json(record: ResultRecord) -> str:
    return json.dumps(record.to_dict(), indent=2)
