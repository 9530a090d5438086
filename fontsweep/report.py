"""
report.py
Human-readable text for scan, copy, font-listing and font-parse results.
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, List
from .types import CopyOutcome, EntryKind, FontParseResult, ScanResult, TraversalOutcome
from .util import format_file_size

KIND_ICONS: Dict[EntryKind, str] = {
    EntryKind.DIRECTORY: "📁",
    EntryKind.REGULAR_FILE: "📄",
    EntryKind.SYMBOLIC_LINK: "🔗",
    EntryKind.OTHER: "❓",
}


def _error_section(title: str, errors: List[str]) -> List[str]:
    if not errors:
        return []
    return ["", f"❌ {title}:"] + [f"• {e}" for e in errors]


def format_scan_report(result: ScanResult) -> str:
    outcome, stats = result.outcome, result.stats
    lines = [
        f"📁 Directory scan: {outcome.root}",
        f"Elapsed: {stats.elapsed_ms} ms",
        "",
        "📊 Summary:",
        f"• Directories: {stats.dir_count}",
        f"• Files: {stats.file_count}",
        f"• Total size: {format_file_size(stats.total_bytes)}",
    ]
    if stats.largest_file is not None:
        lines.append(
            f"• Largest file: {stats.largest_file.name} ({format_file_size(stats.largest_file.size_bytes)})"
        )
    if stats.error_count:
        lines.append(f"• Errors: {stats.error_count}")

    if outcome.entries:
        lines += ["", "📋 Entries:"]
        for e in outcome.entries:
            label = e.content_type or e.kind.value
            if e.kind is EntryKind.DIRECTORY:
                lines.append(f"{KIND_ICONS[e.kind]} {e.name}/")
            else:
                lines.append(f"{KIND_ICONS[e.kind]} {e.name} [{label}] ({format_file_size(e.size_bytes)})")

    lines += _error_section("Errors", outcome.error_messages)
    return "\n".join(lines) + "\n"


def format_copy_report(result: CopyOutcome) -> str:
    lines = [
        "📁 Font copy",
        f"Source: {result.source_root}",
        f"Target: {result.target_root}",
        f"Elapsed: {result.elapsed_ms} ms",
        "",
        "📊 Summary:",
        f"• Discovered: {result.discovered} font files",
        f"• Succeeded: {result.succeeded}",
        f"• Failed: {result.failed}",
        f"• Total size: {format_file_size(result.total_bytes_copied)}",
    ]
    if result.per_file:
        lines += ["", "📋 Details:"]
        for d in result.per_file:
            icon = "✅" if d.success else "❌"
            line = f"{icon} {d.name} ({format_file_size(d.size)})"
            if d.error:
                line += f" - {d.error}"
            lines.append(line)
    lines += _error_section("Errors", result.fatal_errors)
    if result.scan_errors:
        lines += ["", "⚠️ Scan warnings:"] + [f"• {e}" for e in result.scan_errors]
    return "\n".join(lines) + "\n"


def format_font_listing(outcome: TraversalOutcome) -> str:
    if not outcome.entries:
        lines = [f"📁 Directory: {outcome.root}", "❌ No font files found"]
        lines += _error_section("Errors", outcome.error_messages)
        return "\n".join(lines) + "\n"

    lines = [
        f"📁 Directory: {outcome.root}",
        f"🔤 Found {len(outcome.entries)} font files:",
        "",
    ]
    for e in outcome.entries:
        ext = (e.extension or "unknown").upper()
        lines.append(f"• {e.name} ({ext}) - {format_file_size(e.size_bytes)}")
    total = sum(e.size_bytes for e in outcome.entries)
    lines += ["", f"📊 Total: {format_file_size(total)}"]
    return "\n".join(lines) + "\n"


def format_font_report(result: FontParseResult) -> str:
    lines = [
        "🔤 Font parse results",
        "=" * 30,
        f"Total files: {result.total_files}",
        f"Parsed: {result.successful_parses}",
        f"Failed: {result.failed_parses}",
    ]
    if result.mappings:
        lines += ["", "📋 Fonts:", "-" * 30]
        for i, m in enumerate(result.mappings, 1):
            lines.append(f"{i}. {m.font_name}")
            if m.family_name:
                lines.append(f"   Family: {m.family_name}")
            if m.style_name:
                lines.append(f"   Style: {m.style_name}")
            attrs = [a for a, on in (("bold", m.is_bold), ("italic", m.is_italic)) if on]
            if attrs:
                lines.append(f"   Attributes: {', '.join(attrs)}")
            lines.append(f"   File: {Path(m.file_path).name}")
    lines += _error_section("Parse errors", result.errors)
    if result.total_files == 0:
        lines += ["", "ℹ️ No font files found"]
    return "\n".join(lines) + "\n"
