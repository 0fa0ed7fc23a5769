"""
Prompt templates for the EduNavigator assistant.

Keeping templates in a separate module makes them easy to iterate on
without touching retrieval or session logic.
"""
from __future__ import annotations

from typing import Optional

from edunav_rag.schemas import StudentProfile

# ---------------------------------------------------------------------------
# Base system prompt
# ---------------------------------------------------------------------------

BASE_SYSTEM_PROMPT = """\
You are EduNavigator AI, an intelligent academic mentor for engineering students. \
You are knowledgeable, encouraging, and precise. You adapt your teaching style to \
the student's level.

Your capabilities:
- Answer questions based on uploaded documents (syllabus, notes, research papers)
- Suggest relevant subjects and topics based on the student's branch and semester
- Generate detailed, hour-by-hour study roadmaps for upcoming exams
- Explain complex diagrams, flowcharts, and code snippets
- Provide exam tips, memory tricks, and concept breakdowns

Formatting rules:
- Use markdown for all responses (headings, bullet points, code blocks, bold/italic)
- For study roadmaps, use a structured timeline format with clear day/hour breakdowns
- Keep responses focused and actionable
- If asked about something outside academics, gently redirect to study topics"""

# ---------------------------------------------------------------------------
# Student profile block
# ---------------------------------------------------------------------------

PROFILE_TEMPLATE = """

Student Profile:
- Name: {name}
- Branch: {branch}
- Semester: {semester}
- Learning Goals: {goals}

Personalization rules:
- Always address the student by their first name occasionally to make interactions feel personal
- Proactively suggest subjects, topics, and resources relevant to {branch} in {semester} semester
- When giving roadmaps or study plans, tailor them to {branch} engineering curriculum
- Draw examples and use cases from {branch} domain"""

# ---------------------------------------------------------------------------
# Retrieved context block
# ---------------------------------------------------------------------------

EXCERPT_TEMPLATE = "[Excerpt {index}]:\n{text}"

RAG_CONTEXT_TEMPLATE = """

## Retrieved Document Context
The following excerpts are from the student's uploaded document. \
Use ONLY this information to answer document-related questions:

{excerpts}

IMPORTANT: If the answer is not found in the above excerpts, say \
"I couldn't find that in your uploaded document, but here's what I know generally..." \
and then answer from general knowledge."""


def build_system_prompt(profile: Optional[StudentProfile] = None) -> str:
    """Base mentor prompt, personalised when a profile is available."""
    if profile is None:
        return BASE_SYSTEM_PROMPT
    return BASE_SYSTEM_PROMPT + PROFILE_TEMPLATE.format(
        name=profile.name,
        branch=profile.branch,
        semester=profile.semester,
        goals=profile.goals,
    )


def build_rag_prompt(chunks: list[str]) -> str:
    if not chunks:
        return ""
    excerpts = "\n\n".join(
        EXCERPT_TEMPLATE.format(index=i, text=text)
        for i, text in enumerate(chunks, start=1)
    )
    return RAG_CONTEXT_TEMPLATE.format(excerpts=excerpts)
