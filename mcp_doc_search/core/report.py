"""
Report aggregation and rendering

ReportAggregator folds per-document results into one immutable Report;
render_report turns it into the canonical text layout.
"""
from dataclasses import replace
from functools import reduce
from typing import Iterable, Sequence

from .domain import ExtractionResult, Finding, Problem, Report

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".xlsx", ".xls", ".txt")

NO_FINDINGS = "No se encontraron ocurrencias de los textos buscados."
NO_PROBLEMS = "Todos los archivos soportados fueron analizados sin errores."
NO_IGNORED = "No se encontraron archivos con formatos no soportados."


class ReportAggregator:
    """Merges extraction results, in batch order, into a Report"""

    @staticmethod
    def merge(report: Report, result: ExtractionResult) -> Report:
        """Return a new report with one more document accounted for"""
        if result.ignored:
            return replace(
                report,
                ignored=report.ignored + (result.document,),
                selected=report.selected + 1
            )

        files_with_problems = report.files_with_problems
        if result.problems:
            files_with_problems = files_with_problems | {result.document}

        return replace(
            report,
            findings=report.findings + result.findings,
            problems=report.problems + result.problems,
            selected=report.selected + 1,
            processed=report.processed + 1,
            files_with_problems=files_with_problems
        )

    def aggregate(
        self,
        terms: Sequence[str],
        context_chars: int,
        results: Iterable[ExtractionResult]
    ) -> Report:
        empty = Report(terms=tuple(terms), context_chars=context_chars)
        return reduce(self.merge, results, empty)


def format_finding(finding: Finding) -> list[str]:
    """Header line, one line per snippet, then a blank separator"""
    address = finding.address
    if address.sheet is not None:
        location = f"Archivo: '{finding.document}', Hoja: '{address.sheet}', Celda: {address.cell}"
    elif address.line is not None:
        location = f"Archivo: '{finding.document}', Línea: {address.line}"
    elif finding.label:
        location = f"Archivo: '{finding.document}' ({finding.label})"
    else:
        location = f"Archivo: '{finding.document}'"

    return [f"\n{location} -> Encontrado: '{finding.term}'", *finding.snippets, ""]


def format_problem(problem: Problem) -> str:
    return f"Archivo: '{problem.document}' -> ERROR: No se pudo procesar. Razón: {problem.reason}"


def render_report(report: Report) -> str:
    """Render the report as the fixed Spanish text layout.

    Example output (no matches, one ignored file):
        ============================== INFORME DE BÚSQUEDA ==============================
        Textos Buscados: [total]
        ...
        --- ARCHIVOS NO SOPORTADOS E IGNORADOS ---
        Total: 1

        - data.bin
        ...
          - TOTAL DE ARCHIVOS NO SOPORTADOS E IGNORADOS: 1
    """
    lines = []

    # Header
    lines.append("=" * 30 + " INFORME DE BÚSQUEDA " + "=" * 30)
    lines.append(f"Textos Buscados: [{', '.join(report.terms)}]")
    lines.append(
        "Cantidad de Caracteres de Contexto anteriores y posteriores al texto hallado: "
        f"{report.context_chars}"
    )
    lines.append(f"Extensiones Soportadas: {', '.join(SUPPORTED_EXTENSIONS)}")
    lines.append("=" * 79)

    # Findings
    lines.append("\n--- OCURRENCIAS HALLADAS ---")
    if report.findings:
        for finding in report.findings:
            lines.extend(format_finding(finding))
    else:
        lines.append(NO_FINDINGS)

    # Problems
    lines.append("\n\n--- ARCHIVOS PROCESADOS CON PROBLEMAS O ADVERTENCIAS ---")
    if report.problems:
        lines.extend(format_problem(p) for p in report.problems)
    else:
        lines.append(NO_PROBLEMS)

    # Ignored files (the only list re-ordered here)
    lines.append("\n\n--- ARCHIVOS NO SOPORTADOS E IGNORADOS ---")
    lines.append(f"Total: {report.ignored_count}\n")
    if report.ignored:
        lines.extend(f"- {name}" for name in sorted(report.ignored))
    else:
        lines.append(NO_IGNORED)

    # Summary
    lines.append("\n\n" + "=" * 33 + " RESUMEN FINAL " + "=" * 33)
    lines.append(f"TOTAL DE ARCHIVOS SELECCIONADOS: {report.selected}")
    lines.append(f"  - TOTAL DE ARCHIVOS PROCESADOS SIN PROBLEMAS: {report.without_problems}")
    lines.append(f"  - TOTAL DE ARCHIVOS PROCESADOS CON PROBLEMAS O ADVERTENCIAS: {report.with_problems}")
    lines.append(f"  - TOTAL DE ARCHIVOS NO SOPORTADOS E IGNORADOS: {report.ignored_count}")

    return "\n".join(lines)
