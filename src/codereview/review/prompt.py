"""Prompt builder for the code review request."""

from __future__ import annotations

from codereview.languages import AUTO

_SCHEMA = """\
{
  "summary": "A brief 1-2 sentence summary of the code and its overall quality.",
  "bugs": [
    {
      "severity": "critical|warning|info",
      "title": "Short title of the bug",
      "description": "Detailed explanation of the bug and why it's problematic",
      "line": "The problematic code snippet (the actual line or lines)",
      "fix": "The corrected code snippet"
    }
  ],
  "optimizations": [
    {
      "severity": "critical|warning|info",
      "title": "Short title of the optimization",
      "description": "Detailed explanation of why this optimization matters",
      "line": "The current code snippet",
      "fix": "The optimized code snippet"
    }
  ],
  "bestPractices": [
    {
      "severity": "critical|warning|info",
      "title": "Short title of the best practice violation",
      "description": "Detailed explanation of the best practice and why it should be followed",
      "line": "The current code snippet",
      "fix": "The improved code following best practices"
    }
  ],
  "correctedCode": "The entire corrected version of the code with ALL bugs fixed, \
optimizations applied, and best practices followed. Include helpful comments \
where changes were made."
}"""

_RULES = """\
Rules:
- If a category has no issues, return an empty array for it.
- Be specific and actionable in descriptions.
- Provide real, working fix code, not pseudocode.
- The "correctedCode" field must be the FULL corrected version of the input code, not a diff.
- severity must be exactly one of: "critical", "warning", "info"
- Respond with ONLY the JSON object. No other text, no markdown, no code fences."""


def build_prompt(code: str, language: str) -> str:
    """Build the review prompt for *code* written in *language*.

    The code is embedded verbatim; ``auto`` or an empty tag is described
    generically as "code".
    """
    tag = "" if not language or language == AUTO else language
    sections = [
        f"You are an expert senior software engineer and code reviewer. "
        f"Analyze the following {tag or 'code'} and provide a thorough code review.",
        "",
        "You MUST respond with ONLY valid JSON in exactly this format "
        "(no markdown, no code fences, just raw JSON):",
        "",
        _SCHEMA,
        "",
        _RULES,
        "",
        "Here is the code to review:",
        "",
        f"```{tag}",
        code,
        "```",
    ]
    return "\n".join(sections)
