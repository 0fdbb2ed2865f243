#!/usr/bin/env python
"""
Signal Analysis Tool

Runs the intelligence pipeline over a JSON batch of signals and renders the report.
Does NOT require API - pure data analysis.

Usage:
    python scripts/analyze_signals.py                         # bundled sample batch
    python scripts/analyze_signals.py signals.json --org Acme --industry logistics
    python scripts/analyze_signals.py signals.json --org Acme --json --output report.json
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from signal_intel import analyze_signals, AnalysisResult
from signal_intel.config import configure_logging
from signal_intel.samples import SAMPLE_ORGANIZATION, sample_signals


console = Console()

MAGNITUDE_COLORS = {
    "critical": "red",
    "high": "yellow",
    "medium": "cyan",
    "low": "white",
}


def load_signals(path: Path) -> list:
    """Read a JSON file holding either a list of signals or {"signals": [...]}"""
    with open(path, "r") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("signals", [])

    return data


def render_report(result: AnalysisResult, organization_name: str):
    """Print the report as rich tables"""

    console.print(f"\n[bold cyan]Signal Intelligence: {organization_name}[/bold cyan]\n")

    # ============================================
    # 1. SIGNAL ANALYSIS
    # ============================================
    console.print("[bold]1. SIGNAL ANALYSIS[/bold]\n")

    if result.signal_analysis:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Signal", style="cyan")
        table.add_column("Magnitude", justify="center")
        table.add_column("Velocity", justify="center")
        table.add_column("Cred.", justify="right")
        table.add_column("Rel.", justify="right")
        table.add_column("Now What")

        for analysis in result.signal_analysis:
            color = MAGNITUDE_COLORS[analysis.magnitude.value]
            table.add_row(
                analysis.signal[:50] + "..." if len(analysis.signal) > 50 else analysis.signal,
                f"[{color}]{analysis.magnitude.value.upper()}[/{color}]",
                analysis.velocity.value,
                str(analysis.credibility),
                str(analysis.relevance),
                analysis.now_what,
            )

        console.print(table)
    else:
        console.print("[yellow]No signals analyzed[/yellow]")

    console.print()

    # ============================================
    # 2. PATTERNS
    # ============================================
    console.print("[bold]2. PATTERNS[/bold]\n")

    if result.pattern_recognition:
        table = Table(show_header=True, header_style="bold green")
        table.add_column("Type", style="green")
        table.add_column("Confidence", justify="right")
        table.add_column("Insight")

        for pattern in result.pattern_recognition:
            table.add_row(pattern.type, str(pattern.confidence), pattern.insight)

        console.print(table)
    else:
        console.print("[yellow]No cross-signal patterns detected[/yellow]")

    console.print()

    # ============================================
    # 3. STAKEHOLDERS
    # ============================================
    console.print("[bold]3. STAKEHOLDER IMPACT[/bold]\n")

    table = Table(show_header=True, header_style="bold blue")
    table.add_column("Group", style="blue")
    table.add_column("Concern", justify="center")
    table.add_column("Perception Shift")

    for group, impact in result.stakeholder_impact:
        table.add_row(group, impact.concern_level.value, impact.perception_shift)

    console.print(table)
    console.print()

    # ============================================
    # 4. STRATEGIC VERDICT
    # ============================================
    implications = result.strategic_implications
    reputation = implications.reputation
    position = implications.competitive_position

    color = {
        "crisis": "red",
        "declining": "yellow",
    }.get(reputation.trajectory.value, "green")

    verdict_text = (
        f"**Reputation:** {reputation.current_state}\n"
        f"**Trajectory:** [{color}]{reputation.trajectory.value.upper()}[/{color}]"
        f" | **Intervention:** {reputation.intervention_required.value}\n"
        f"**Position:** {position.relative_strength.value} ({position.momentum.value})\n"
    )
    if reputation.key_vulnerabilities:
        verdict_text += "\n**Vulnerabilities:**\n" + "\n".join(f"- {v}" for v in reputation.key_vulnerabilities)

    console.print(Panel(verdict_text, title="[bold]4. STRATEGIC IMPLICATIONS[/bold]", border_style=color))
    console.print()

    # ============================================
    # 5. RESPONSE PLAN
    # ============================================
    console.print("[bold]5. RESPONSE STRATEGY[/bold]\n")

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Horizon", style="magenta")
    table.add_column("Priority", justify="center")
    table.add_column("Actions")

    for horizon, plan in result.response_strategy:
        table.add_row(horizon, plan.priority.value, ", ".join(plan.actions))

    console.print(table)
    console.print()

    # ============================================
    # 6. ELITE INSIGHTS
    # ============================================
    console.print("[bold]6. ELITE INSIGHTS[/bold]\n")

    any_insight = False
    for section, items in result.elite_insights:
        if not items:
            continue
        any_insight = True
        console.print(f"[bold]{section.replace('_', ' ').title()}[/bold]")
        for item in items:
            console.print(f"  • {item}")

    if not any_insight:
        console.print("[yellow]No elite insights for this batch[/yellow]")

    console.print()


def main():
    parser = argparse.ArgumentParser(description="Analyze a batch of intelligence signals")
    parser.add_argument(
        "signals_file",
        nargs="?",
        type=Path,
        help="JSON file with signals (omit to use the sample batch)",
    )
    parser.add_argument("--org", help="Organization name")
    parser.add_argument("--industry", help="Organization industry")
    parser.add_argument(
        "--keyword",
        action="append",
        default=[],
        help="Relevance keyword (repeatable)",
    )
    parser.add_argument("--json", action="store_true", help="Print raw JSON instead of tables")
    parser.add_argument("--output", type=Path, help="Write the JSON report to this path")
    parser.add_argument("--log-level", help="Override SIGNAL_INTEL_LOG_LEVEL")

    args = parser.parse_args()

    configure_logging(args.log_level)

    if args.signals_file:
        try:
            signals = load_signals(args.signals_file)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Could not read signals from {args.signals_file}: {e}")
            sys.exit(1)
        organization = {"name": args.org, "industry": args.industry, "keywords": args.keyword}
    else:
        logger.info("No signals file given - using sample batch")
        signals = sample_signals()
        organization = SAMPLE_ORGANIZATION

    try:
        result = analyze_signals(signals, organization)
    except ValidationError as e:
        logger.error(f"Analysis failed: {e}")
        sys.exit(1)

    report = result.model_dump(mode="json")
    name = organization["name"] if isinstance(organization, dict) else organization.name

    if args.json:
        console.print_json(json.dumps(report))
    else:
        render_report(result, name)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, "w") as f:
            json.dump(report, f, indent=2)
        logger.success(f"Report saved to: {args.output}")


if __name__ == "__main__":
    main()
