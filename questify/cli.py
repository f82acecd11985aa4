"""
Questify CLI.

Commands for generating quizzes from plain text and grading attempts.

Examples:
    questify generate notes.txt --type mcq --count 5 --difficulty medium -o quiz.json
    questify grade quiz.json answers.json --time-spent 240
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import typer
from loguru import logger
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from config import get_settings
from questify.assessment import AnswerEvaluator, PerformanceAggregator
from questify.errors import QuizGenerationError
from questify.generation import QuizGenerator
from questify.models import AttemptSummary, Difficulty, PerformanceReport, QuestionType, QuizSet, RequesterRole

app = typer.Typer(
    help="Generate gradable quizzes from raw text and score attempts",
    no_args_is_help=True,
)

console = Console()


def configure_logging(level: str | None = None) -> None:
    """Route loguru to stderr (and the configured log file, if any)."""
    settings = get_settings()
    logger.remove()
    logger.add(
        sys.stderr,
        level=level or settings.log_level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )
    if settings.log_file:
        logger.add(settings.log_file, level="DEBUG", rotation="10 MB", retention=5)


def _read_text(path: Path) -> str:
    if not path.exists():
        console.print(f"[red]Error: Source not found: {path}[/red]")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def answers_from_json(data: Any) -> dict[str, str]:
    """
    Turn a decoded answers file into an AnswerRecord.

    Null answers are left out so they grade as unanswered.
    """
    if not isinstance(data, dict):
        raise ValueError("answers must be a JSON object of id -> answer")
    return {str(k): str(v) for k, v in data.items() if v is not None}


def _render_quiz(quiz: QuizSet) -> None:
    table = Table(title=quiz.title, box=box.MINIMAL_HEAVY_HEAD, show_lines=True)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Question", style="white")
    table.add_column("Options", style="yellow")
    table.add_column("Concept", style="magenta")
    table.add_column("Pts", justify="right")

    for question in quiz.questions:
        table.add_row(
            question.id,
            question.prompt,
            "\n".join(question.options) if question.options else "-",
            question.concept,
            str(question.points),
        )
    console.print(table)
    console.print(
        f"[dim]{len(quiz)} questions, {quiz.total_points} points, ~{quiz.estimated_minutes} min[/dim]"
    )


def _render_summary(summary: AttemptSummary, report: PerformanceReport) -> None:
    console.print(
        Panel(
            f"[bold]{summary.percentage}%[/bold]  {report.verdict}\n"
            f"{summary.correct_answers} correct, {summary.incorrect_answers} incorrect, "
            f"{summary.average_time_per_question}s per question",
            title="[bold cyan]RESULT[/bold cyan]",
            border_style="cyan",
            box=box.HEAVY,
        )
    )

    table = Table(box=box.MINIMAL, show_header=True)
    table.add_column("ID", style="cyan")
    table.add_column("Your answer")
    table.add_column("Correct answer")
    table.add_column("", justify="center")
    for item in summary.feedback:
        mark = "[green]✓[/green]" if item.is_correct else "[red]✗[/red]"
        table.add_row(item.question_id, item.user_answer or "[dim]-[/dim]", item.correct_answer, mark)
    console.print(table)

    concepts = Table(title="Concepts", box=box.MINIMAL)
    concepts.add_column("Concept", style="magenta")
    concepts.add_column("Correct", justify="right")
    concepts.add_column("%", justify="right")
    for stat in report.concept_stats:
        concepts.add_row(stat.concept, f"{stat.correct}/{stat.total}", str(stat.percentage))
    console.print(concepts)

    for line in report.suggestions:
        console.print(f"[yellow]• {line}[/yellow]")
    for line in report.strengths:
        console.print(f"[green]• {line}[/green]")


@app.command("generate")
def generate(
    source: Path = typer.Argument(..., help="Plain text file to generate questions from"),
    quiz_type: QuestionType = typer.Option(QuestionType.MCQ, "--type", "-t", help="Question type"),
    count: int = typer.Option(None, "--count", "-n", min=1, help="Number of questions"),
    difficulty: Difficulty = typer.Option(Difficulty.MEDIUM, "--difficulty", "-d", help="Difficulty"),
    role: RequesterRole = typer.Option(None, "--role", help="Requester role (explanation wording)"),
    seed: int = typer.Option(None, "--seed", help="Random seed for reproducible output"),
    output: Path = typer.Option(None, "--output", "-o", help="Save the quiz as JSON"),
):
    """Generate a quiz from a text file."""
    settings = get_settings()
    count = count or settings.quiz_default_count
    if count > settings.quiz_max_count:
        console.print(f"[red]Error: at most {settings.quiz_max_count} questions per quiz[/red]")
        raise typer.Exit(1)

    text = _read_text(source)
    try:
        quiz = QuizGenerator(seed=seed).generate(text, quiz_type, count, difficulty, role)
    except QuizGenerationError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    _render_quiz(quiz)

    if output:
        output.write_text(quiz.model_dump_json(indent=2), encoding="utf-8")
        console.print(f"[green]+[/green] Saved quiz to {output}")


@app.command("grade")
def grade(
    quiz_file: Path = typer.Argument(..., help="Quiz JSON written by 'generate --output'"),
    answers_file: Path = typer.Argument(..., help="JSON object mapping question id to answer"),
    time_spent: int = typer.Option(0, "--time-spent", min=0, help="Seconds spent on the attempt"),
    output: Path = typer.Option(None, "--output", "-o", help="Save the attempt summary as JSON"),
):
    """Grade an attempt and print concept-level feedback."""
    try:
        quiz = QuizSet.model_validate_json(_read_text(quiz_file))
        answers = answers_from_json(json.loads(_read_text(answers_file)))
    except ValueError as e:
        console.print(f"[red]Error: could not parse input: {e}[/red]")
        raise typer.Exit(1)

    summary = AnswerEvaluator().evaluate_attempt(quiz, answers, time_spent)
    report = PerformanceAggregator().build_report(summary)
    _render_summary(summary, report)

    if output:
        output.write_text(summary.model_dump_json(indent=2), encoding="utf-8")
        console.print(f"[green]+[/green] Saved attempt to {output}")


def main() -> None:
    """CLI entry point."""
    configure_logging()
    app()


if __name__ == "__main__":
    main()
