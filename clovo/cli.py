"""CLI for Clovo: analyze, generate, passphrase, batch, compare, policy and export."""

import argparse
import logging
import sys

from rich import print
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .comparison import compare_passwords
from .config import generator_options_from_config, load_config
from .errors import GeneratorError
from .evaluator import StrengthLevel, StrengthResult, analyze_password, format_crack_time
from .export import (
    ExportFormat,
    export_analysis,
    export_batch_results,
    read_batch_file,
    render_analysis,
    render_batch,
)
from .generator import HARD_MAX_LENGTH, cleanup_generator, generate_passphrase, generate_password, init_generator
from .policy import init_policy, parse_policy_type, policy_type_to_string, validate_policy
from .storage import default_data_dir
from .suggestions import suggest_improvements

logger = logging.getLogger("clovo")

_LEVEL_STYLES = {
    StrengthLevel.NO_PASSWORD: "red",
    StrengthLevel.VERY_WEAK: "red",
    StrengthLevel.WEAK: "yellow",
    StrengthLevel.MEDIUM: "yellow",
    StrengthLevel.STRONG: "green",
    StrengthLevel.VERY_STRONG: "bold green",
}

_WEAKNESSES = [
    ("has_sequential_pattern", "Sequential pattern found (e.g., 123, abc)"),
    ("has_keyboard_pattern", "Keyboard pattern found (e.g., qwerty, asdf)"),
    ("has_repeated_chars", "Repeated characters found (e.g., aaa, 111)"),
    ("has_repeated_pattern", "Repeated pattern found (e.g., abcabc)"),
    ("contains_dictionary_word", "Dictionary word detected"),
    ("contains_leetspeak", "Disguised dictionary word detected (e.g., P@ssw0rd)"),
    ("contains_personal_info", "Personal information detected"),
]


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_time=False, show_path=False)],
    )


def _bar(score: int, width: int = 40) -> str:
    filled = score * width // 100
    return "█" * filled + "░" * (width - filled)


def _yes_no(flag: bool) -> str:
    return "[green]Yes[/green]" if flag else "[red]No[/red]"


def show_analysis(result: StrengthResult, store=None) -> None:
    style = _LEVEL_STYLES[result.level]
    body = (
        f"Length: {result.length} characters\n"
        f"Lowercase: {_yes_no(result.has_lower)}   Uppercase: {_yes_no(result.has_upper)}   "
        f"Digits: {_yes_no(result.has_digit)}   Symbols: {_yes_no(result.has_symbol)}\n"
        f"Entropy: {result.entropy:.1f} bits\n"
        f"Crack time: {format_crack_time(result.crack_time_seconds)}\n"
        f"[{style}]{_bar(result.strength_score)}[/{style}] {result.strength_score}/100"
    )
    header = f"Rating: {result.level.label}"
    print(Panel(body, title=header, border_style=style))

    weaknesses = [text for attr, text in _WEAKNESSES if getattr(result, attr)]
    if weaknesses:
        print("[bold]Weaknesses detected:[/bold]")
        for w in weaknesses:
            print(f" • [yellow]{w}[/yellow]")
        print(f" • [red]Pattern penalty: -{result.pattern_penalty} points[/red]")

    if result.level >= StrengthLevel.STRONG:
        print("[bold green]Excellent password! This password is highly secure.[/bold green]")
        return
    sugg = suggest_improvements(result, store=store)
    if sugg["suggestions"]:
        print("\n[bold]Recommendations:[/bold]")
        for s in sugg["suggestions"]:
            print(f" • {s}")
    if sugg["examples"]:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Example stronger password")
        for ex in sugg["examples"]:
            table.add_row(escape(ex))
        print(table)


def show_generated(password: str, title: str) -> None:
    result = analyze_password(password)
    style = _LEVEL_STYLES[result.level]
    body = (
        f"[bold cyan]{escape(password)}[/bold cyan]\n"
        f"Length: {len(password)} characters\n"
        f"[{style}]{_bar(result.strength_score)}[/{style}] {result.strength_score}/100\n"
        f"Rating: [{style}]{result.level.label}[/{style}]"
    )
    print(Panel(body, title=title))


def cmd_analyze(args, cfg, store) -> int:
    if len(args.password) > HARD_MAX_LENGTH:
        print(f"[red]Password too long (max {HARD_MAX_LENGTH} characters)[/red]")
        return 1
    result = analyze_password(args.password, args.user_info)
    fmt = ExportFormat(args.format)
    if fmt is ExportFormat.TEXT:
        show_analysis(result, store)
    else:
        sys.stdout.write(render_analysis(result, args.password, fmt))
    return 0


def cmd_generate(args, cfg, store) -> int:
    opts = generator_options_from_config(cfg)
    opts.include_symbols = not args.no_symbols
    opts.include_uppercase = not args.no_upper
    opts.include_lowercase = not args.no_lower
    opts.include_digits = not args.no_digits
    if args.no_check_common:
        opts.check_common = False
    length = args.length if args.length is not None else cfg["generate_length"]
    for i in range(args.copies):
        pw = generate_password(length, opts, store=store)
        show_generated(pw, f"Generated password #{i + 1}")
    return 0


def cmd_passphrase(args, cfg, store) -> int:
    opts = generator_options_from_config(cfg)
    opts.include_uppercase = not args.lowercase
    opts.include_digits = not args.no_digit
    words = args.words if args.words is not None else cfg["passphrase_words"]
    phrase = generate_passphrase(words, opts, store=store)
    show_generated(phrase, "Generated passphrase")
    return 0


def cmd_batch(args, cfg, store) -> int:
    passwords = read_batch_file(args.file)
    if not passwords:
        print("[red]No passwords found in file[/red]")
        return 1
    results = [analyze_password(p) for p in passwords]
    fmt = ExportFormat(args.format)
    if args.output:
        export_batch_results(results, passwords, args.output, fmt)
        print(f"[green]Exported {len(results)} results to:[/green] {escape(args.output)}")
    elif fmt is ExportFormat.TEXT:
        for i, result in enumerate(results):
            print(f"\n[bold]--- Password {i + 1} ---[/bold]")
            show_analysis(result, store)
    else:
        sys.stdout.write(render_batch(results, passwords, fmt))
    return 0


def cmd_compare(args, cfg, store) -> int:
    threshold = args.threshold if args.threshold is not None else cfg["similarity_threshold"]
    result = compare_passwords(args.first, args.second, threshold)
    table = Table(show_header=False, title="Password Comparison")
    table.add_row("Similarity score", f"{result.similarity_score * 100:.2f}%")
    table.add_row("Edit distance", str(result.edit_distance))
    table.add_row("Common characters", str(result.common_chars))
    table.add_row("Common positions", str(result.common_positions))
    table.add_row("Too similar", "Yes" if result.is_similar else "No")
    print(table)
    if result.is_similar:
        print("[yellow]Warning: These passwords are too similar![/yellow]")
    return 0


def cmd_policy(args, cfg, store) -> int:
    policy_type = parse_policy_type(args.type)
    result = validate_policy(args.password, init_policy(policy_type))
    status = "[green]PASSED[/green]" if result.passed else "[red]FAILED[/red]"
    print(f"Policy Validation ({policy_type_to_string(policy_type)}): {status}")
    for v in result.violations:
        print(f" • {escape(v)}")
    return 0 if result.passed else 1


def cmd_export(args, cfg, store) -> int:
    result = analyze_password(args.password, args.user_info)
    export_analysis(result, args.password, args.output, ExportFormat(args.format))
    print(f"[green]Exported analysis to:[/green] {escape(args.output)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="clovo", description="Password strength analyzer & generator")
    parser.add_argument("--data-dir", type=str, help="Directory containing common_passwords.txt")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose (debug) logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    an = sub.add_parser("analyze", help="Analyze password strength")
    an.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    an.add_argument("--user-info", type=str, help="Name/username that must not appear in the password")
    an.add_argument("--format", choices=[f.value for f in ExportFormat], default="text")
    an.set_defaults(func=cmd_analyze)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, help="Password length (default from config: 16)")
    gen.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--no-check-common", action="store_true", help="Skip the common-password check")
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    gen.set_defaults(func=cmd_generate)

    pp = sub.add_parser("passphrase", help="Generate a passphrase of random words")
    pp.add_argument("--words", type=int, help="Number of words, 2-10 (default from config: 4)")
    pp.add_argument("--lowercase", action="store_true", help="Do not capitalize words")
    pp.add_argument("--no-digit", action="store_true", help="Do not append a digit")
    pp.set_defaults(func=cmd_passphrase)

    bt = sub.add_parser("batch", help="Analyze passwords from a file, one per line")
    bt.add_argument("file", type=str)
    bt.add_argument("--format", choices=[f.value for f in ExportFormat], default="text")
    bt.add_argument("--output", "-o", type=str, help="Write results to this file")
    bt.set_defaults(func=cmd_batch)

    cp = sub.add_parser("compare", help="Compare two passwords")
    cp.add_argument("first", type=str)
    cp.add_argument("second", type=str)
    cp.add_argument("--threshold", type=float, help="Similarity threshold (default from config: 0.7)")
    cp.set_defaults(func=cmd_compare)

    po = sub.add_parser("policy", help="Validate a password against a policy")
    po.add_argument("type", choices=["nist", "pci", "pci-dss", "basic", "custom"])
    po.add_argument("password", type=str)
    po.set_defaults(func=cmd_policy)

    ex = sub.add_parser("export", help="Export analysis to a file")
    ex.add_argument("format", choices=[ExportFormat.JSON.value, ExportFormat.CSV.value])
    ex.add_argument("output", type=str)
    ex.add_argument("password", type=str)
    ex.add_argument("--user-info", type=str)
    ex.set_defaults(func=cmd_export)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    cfg = load_config()
    data_dir = args.data_dir or cfg.get("data_dir") or default_data_dir()
    logger.debug("using data directory %s", data_dir)
    store = init_generator(data_dir)
    try:
        return args.func(args, cfg, store)
    except GeneratorError as e:
        detail = str(e)
        if detail != e.status.description:
            detail = f"{e.status.description}: {detail}"
        print(f"[red]Error: {escape(detail)}[/red]")
        return 1
    except OSError as e:
        print(f"[red]Error: {escape(str(e))}[/red]")
        return 1
    finally:
        cleanup_generator(store)


if __name__ == "__main__":
    sys.exit(main())
