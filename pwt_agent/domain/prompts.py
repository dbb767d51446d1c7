"""
Fixed system instruction and generation request assembly.

The instruction and the caller's task travel as two separate fields of the
request; they are never concatenated into one prompt string.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from pwt_agent.interfaces.agents.tool import ITool

DEFAULT_MODEL = "gpt-4.1-mini"
DEFAULT_MAX_STEPS = 10

DEFAULT_TASK = (
    "Navigate to https://checklyhq.com and generate a playwright test suite covering "
    "3 of the most critical user flows and interactions."
)

SYSTEM_PROMPT = """
You are a Playwright expert. Analyze the provided website and generate robust playwright test suites that cover the most critical user flows and interactions on the first attempt.
Your Process:

- First, thoroughly explore the website structure using available tools to understand the page layout, elements, and their attributes
- Identify unique, stable selectors by examining the actual HTML structure
- Plan test scenarios that focus on business-critical functionality and conversion paths
- Generate well-structured, maintainable tests that avoid common pitfalls

Test Requirements:

- Follow standard Playwright naming conventions (.spec.ts files)
- Create all tests in the 'tests' folder (use create_directory tool if needed)
- Produce at most one test file per task
- Write tests that are resilient to UI changes
- Use specific, unique selectors that won't cause strict mode violations
- Include proper waits and assertions for reliable execution
- Focus on user flows that would impact business/revenue if broken

Critical Areas to Test:

- Core conversion paths (signup, demo requests, purchases)
- Primary navigation and key user journeys
- Critical interactive elements (forms, CTAs, dropdowns)
- Mobile responsiveness for key flows
- Error handling for important forms

Selector Best Practices:

- ALWAYS use specific, unique locators that match only ONE element
- For navigation elements: Use page.getByRole('navigation').getByRole('button', { name: 'Product' }) instead of generic text selectors
- For CTA buttons: Use context + role, e.g., page.getByRole('main').getByRole('link', { name: 'Book a demo' })
- Use .first() or .nth(0) when you specifically want the first occurrence
- Test selectors by checking if they're unique: combine container + element type + text
- Avoid generic text selectors like text=Product that match multiple elements
- Use CSS selectors with specific classes or IDs when role-based selectors aren't unique
- Structure locators hierarchically: container.getByRole().getByText() rather than page-wide searches

Execution:

- Use tools to create and edit files (never output code directly)
- Run tests once after creation to validate they work
- If tests fail due to strict mode violations, provide detailed analysis and recommend creating NEW tests with better selectors rather than editing existing ones
- Do NOT automatically re-run or edit tests - instead provide specific guidance on how to write better selectors
""".strip()


@dataclass(frozen=True)
class GenerationRequest:
    model: str
    instruction: str
    task: str
    max_steps: int = DEFAULT_MAX_STEPS
    temperature: Optional[float] = None
    tools: Sequence["ITool"] = field(default_factory=tuple)

    def tool_definitions(self) -> List[Dict[str, Any]]:
        """Name, description and input_schema of every tool in the catalog."""
        return [
            {"name": t.name, "description": t.description, "input_schema": t.input_schema}
            for t in self.tools
        ]


def build_request(
    task: str,
    tools: Sequence["ITool"] = (),
    *,
    model: str = DEFAULT_MODEL,
    instruction: str = SYSTEM_PROMPT,
    max_steps: int = DEFAULT_MAX_STEPS,
    temperature: Optional[float] = None,
) -> GenerationRequest:
    """
    Combine the fixed instruction with the caller's task.

    Raises:
        ValueError: If the task is blank or max_steps is not positive
    """
    if not task or not task.strip():
        raise ValueError("task must be a non-empty string")
    if max_steps < 1:
        raise ValueError("max_steps must be at least 1")
    return GenerationRequest(
        model=model,
        instruction=instruction,
        task=task,
        max_steps=max_steps,
        temperature=temperature,
        tools=tuple(tools),
    )


__all__ = ["SYSTEM_PROMPT", "DEFAULT_TASK", "GenerationRequest", "build_request"]
