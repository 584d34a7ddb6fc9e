"""Prompt templates for question-bank summaries and analyst profiles."""

from __future__ import annotations

from callqa.pipeline.schemas import AnalystQuestionRecord

# ---------------------------------------------------------------------------
# Question-bank summary
# ---------------------------------------------------------------------------

SUMMARY_SYSTEM_PROMPT = """\
You are an expert financial analyst summarizing earnings call questions. \
Provide exactly 4-5 concise bullet points that capture the main themes and \
focus areas from the analyst questions. Each bullet should be one clear sentence.
"""

SUMMARY_QUERY = """\
QUERY:
Analyze these analyst questions in the context of the company's financial \
performance and provide exactly 4-5 concise bullet points summarizing the main \
themes and focus areas. Each bullet should capture a key topic that multiple \
analysts were interested in, following this format:
• Asked management to [explain/clarify/discuss] [main topic] including [specific details/metrics if mentioned]

Incorporate the financial context where relevant and focus on the most \
significant recurring themes that align with the company's financial position \
and performance.
"""

FALLBACK_SUMMARY_TEMPLATE = (
    "• Key analyst focus areas identified\n"
    "• {count} questions analyzed\n"
    "• Multiple analysts participated\n"
    "• Various topics discussed"
)

# ---------------------------------------------------------------------------
# Analyst profile
# ---------------------------------------------------------------------------

PROFILE_SYSTEM_PROMPT = """\
You are an expert financial analyst profiler. Generate comprehensive analyst \
profiles based on the provided template and data.
"""

PROFILE_TEMPLATE = """\
## Role
You are an experienced investor-relations analyst covering **{CompanyName}** and its competitive peers.
## Objective
Create a one-page "Analyst Profile" for **{AnalystName}** that captures their sell-side \
questioning philosophy and key takeaways for **{CompanyName}** and its competitors.
## Tasks
1. **Theme Extraction**
   - Identify the top 5–7 recurring topics (e.g., revenue drivers, margin expansion, capital allocation).
   - For each theme, provide a sentence or two of description and 1-2 verbatim examples.
2. **Analyst Philosophy**
   - Write a 2–3 sentence statement summarizing their overall approach: what they value most, \
how they frame risk vs. opportunity, and which metrics or narratives they prioritize.
3. **Trigger Metrics**
   - Identify the key metrics the analyst tends to focus on.
4. **Temporal Trends**
   - Compare theme emphasis across the quarters covered and note any evolution in question style.
5. **Stylistic & Response Preferences**
   - Identify signature phrasing patterns and how this analyst prefers to receive answers.
6. **{CompanyName}-Specific Insights**
   - Summarize 3–5 bullet points of what this analyst's questions reveal about \
**{CompanyName}**'s strategic strengths, challenges, or blind spots.
## Output Format
- Use Markdown with `##` headings for each section, bullet lists, and concise narrative paragraphs.
- Use bullet points and numbered lists exclusively; do not create tables or ASCII charts.
- Target a single-page summary (~450–750 words).
"""


def format_question_bank(records: list[AnalystQuestionRecord]) -> str:
    """Number questions as ``1. Name (Title, Company): question``."""
    return "\n\n".join(
        f"{i}. {r.analyst_name} ({r.analyst_title}, {r.analyst_company}): {r.question}"
        for i, r in enumerate(records, start=1)
    )


def build_summary_prompt(
    symbol: str,
    records: list[AnalystQuestionRecord],
    financial_context: str | None = None,
) -> str:
    """Financial context (optional), then the question bank, then the query."""
    parts: list[str] = []
    if financial_context:
        parts.append(f"## FINANCIAL CONTEXT FOR {symbol}\n{financial_context.strip()}\n\n---\n\n")
    parts.append(f"ANALYST QUESTIONS BANK FOR {symbol}:\n\n{format_question_bank(records)}\n\n---\n\n")
    parts.append(SUMMARY_QUERY)
    return "".join(parts)


def build_profile_prompt(analyst_name: str, company_names: str, questions: list[str]) -> str:
    prompt = PROFILE_TEMPLATE.replace("{AnalystName}", analyst_name).replace("{CompanyName}", company_names)
    bank = "\n\n".join(f"{i}. {q}" for i, q in enumerate(questions, start=1))
    return f"{prompt}\n## Questions asked by {analyst_name}\n\n{bank}\n"
