"""Rule-based quiz generation from raw text.

Pipeline:
1. Segment text into sentences, keywords and concepts
2. Primary builder (MCQ, fill-up or short answer) draws sentences at random
3. Fallback generator tops up any deficit with relaxed rules
4. Orchestrator shuffles and truncates to the requested count

Usage:
    from questify.generation import QuizGenerator

    quiz = QuizGenerator(seed=42).generate(text, "mcq", count=5, difficulty="medium")
    for question in quiz.questions:
        print(question.prompt, question.options)
"""
from questify.generation.builders import (
    BUILDERS,
    BuildContext,
    FillupBuilder,
    MCQBuilder,
    QuestionBuilder,
    ShortAnswerBuilder,
    get_builder,
)
from questify.generation.distractors import DistractorSynthesizer
from questify.generation.fallback import FallbackGenerator
from questify.generation.quiz_generator import QuizGenerator, generate_quiz

__all__ = [
    "BUILDERS",
    "BuildContext",
    "DistractorSynthesizer",
    "FallbackGenerator",
    "FillupBuilder",
    "MCQBuilder",
    "QuestionBuilder",
    "QuizGenerator",
    "ShortAnswerBuilder",
    "generate_quiz",
    "get_builder",
]
