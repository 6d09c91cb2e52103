import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from mobilizer.backend_client import BuilderBackendClient
from mobilizer.config import MobilizerConfig
from mobilizer.importer import ImportResult, run_import
from mobilizer.tools.artifacts_fs import RunArtifacts
from mobilizer.tools.models import ThemeSummary
from mobilizer.tools.theme_analyzer import analyze_theme, summarize_analysis
from mobilizer.tools.theme_zip import ThemeArchiveError, read_theme_archive

console = Console()


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
    )


def _zip_path(raw: str) -> Path:
    path = Path(raw).expanduser().resolve()
    if not path.exists() or not path.is_file():
        raise SystemExit(f"theme zip does not exist or is not a file: {path}")
    return path


def _print_summary(summary: ThemeSummary, readiness: int) -> None:
    table = Table(title=f"{summary.name} ({summary.version})", show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value")
    table.add_row("Mobile readiness", f"{readiness}/100")
    table.add_row("Sections", str(len(summary.sections)))
    table.add_row("Snippets", str(len(summary.snippets)))
    table.add_row("Templates", str(len(summary.templates)))
    table.add_row("Assets", str(len(summary.assets)))
    table.add_row("Colors", ", ".join(summary.colors) or "(none)")
    table.add_row("Fonts", ", ".join(summary.fonts) or "(none)")
    console.print(table)


def build_report(result: ImportResult) -> str:
    summary = result.summary
    report = [
        f"# Theme import: {result.theme_name}",
        "",
        f"**Theme:** {summary.name} ({summary.version})",
        f"**Mobile readiness:** {result.analysis.mobile_readiness}/100",
        f"**Generation strategy:** `{result.generation.strategy}`",
        "",
        "## Steps",
    ]
    for step in result.steps:
        report.append(f"- `{step.id}` {step.name}: **{step.status}**")

    report += ["", "## Inventory"]
    report += [
        f"- Sections: **{len(summary.sections)}**",
        f"- Snippets: **{len(summary.snippets)}**",
        f"- Templates: **{len(summary.templates)}**",
        f"- Assets: **{len(summary.assets)}**",
    ]

    report += ["", "## Generated components"]
    for c in result.generation.components:
        report.append(f"- `{c.type.value}` → `{c.id}`")

    report += ["", "## Save"]
    if result.saved_to_backend:
        report.append(f"- Saved to backend as `{result.saved_id}`")
    else:
        report.append(f"- Not saved to backend; local copy `{result.saved_id}.json`")

    return "\n".join(report) + "\n"


def write_artifacts(artifacts: RunArtifacts, result: ImportResult) -> None:
    artifacts.write_json("analysis.json", result.analysis.to_dict())
    artifacts.write_json("theme_summary.json", result.summary.to_dict())
    artifacts.write_json("components.json", result.generation.to_dict())
    artifacts.write_json("steps.json", [s.to_dict() for s in result.steps])
    artifacts.write_text("report.md", build_report(result))


def cmd_analyze(args: argparse.Namespace, config: MobilizerConfig) -> None:
    zip_path = _zip_path(args.zip)
    try:
        archive = read_theme_archive(zip_path, max_entry_bytes=config.max_entry_bytes)
    except ThemeArchiveError as e:
        raise SystemExit(str(e))

    analysis = analyze_theme(archive.files)
    summary = summarize_analysis(analysis, theme_name=archive.name, asset_entries=archive.asset_entries)

    if args.json:
        payload = summary.to_dict()
        payload["mobileReadiness"] = analysis.mobile_readiness
        console.print_json(json.dumps(payload))
        return
    _print_summary(summary, analysis.mobile_readiness)


def cmd_convert(args: argparse.Namespace, config: MobilizerConfig) -> None:
    zip_path = _zip_path(args.zip)
    config = config.with_overrides(
        backend_url=args.backend_url,
        runs_dir=Path(args.runs_dir).expanduser().resolve() if args.runs_dir else None,
        max_sections=args.max_sections,
    )

    try:
        archive = read_theme_archive(zip_path, max_entry_bytes=config.max_entry_bytes)
    except ThemeArchiveError as e:
        raise SystemExit(str(e))

    client: Optional[BuilderBackendClient] = None
    if args.save:
        if not config.backend_url:
            raise SystemExit("--save needs a backend url (--backend-url or MOBILIZER_BACKEND_URL)")
        client = BuilderBackendClient(
            base_url=config.backend_url,
            api_token=config.backend_token,
            save_path=config.backend_save_path,
            timeout_sec=config.backend_timeout_sec,
            max_retries=config.backend_max_retries,
        )

    artifacts = RunArtifacts.for_run(config.runs_dir, archive.name)
    console.print(Panel.fit(f"theme: {archive.name}\nartifacts: {artifacts.root}", title="mobilizer"))

    result = run_import(archive, config, client=client, artifacts=artifacts)
    write_artifacts(artifacts, result)

    _print_summary(result.summary, result.analysis.mobile_readiness)
    console.print(f"✅ Generated {len(result.generation.components)} components ({result.generation.strategy}).")
    console.print(f"   Open: {artifacts.root / 'report.md'}")


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(prog="mobilizer")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    an_p = sub.add_parser("analyze", help="Analyze a Shopify theme ZIP and print its mobile summary")
    an_p.add_argument("--zip", required=True, help="Path to the theme ZIP file")
    an_p.add_argument("--json", action="store_true", help="Print the summary as JSON")

    conv_p = sub.add_parser("convert", help="Convert a Shopify theme ZIP into mobile app components")
    conv_p.add_argument("--zip", required=True, help="Path to the theme ZIP file")
    conv_p.add_argument("--runs-dir", default=None, help="Where to store run artifacts")
    conv_p.add_argument("--save", action="store_true", help="Save the generated app to the builder backend")
    conv_p.add_argument("--backend-url", default=None, help="Builder backend base url")
    conv_p.add_argument("--max-sections", type=int, default=None, help="Cap on mapped sections")

    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    config = MobilizerConfig.from_env()

    if args.cmd == "analyze":
        cmd_analyze(args, config)
        return

    if args.cmd == "convert":
        cmd_convert(args, config)
        return


if __name__ == "__main__":
    main()
