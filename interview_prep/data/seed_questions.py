"""Built-in practice questions loaded into the catalog at startup.

Entries omit the fields the catalog assigns itself. ``load_seed_questions``
derives them deterministically so ids stay stable across restarts:

- ``id`` is a UUIDv5 of the title.
- ``skill_id`` is a UUIDv5 of the skill slug (see ``SKILL_IDS``), taken from
  the first technology, or from the question type for ``general`` questions.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

from interview_prep.schemas.questions import Question

SEED_NAMESPACE = uuid.UUID("9b2f7a52-2c1e-4f8e-a0d6-3c4b5e6f7a81")
SEED_CREATED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _anchors(*levels: str) -> dict[str, str]:
    return {str(score): text for score, text in enumerate(levels, start=1)}


CONCEPTUAL_RUBRIC = [
    {
        "name": "Understanding",
        "weight": 0.4,
        "anchors": _anchors(
            "Cannot explain the concept or provides incorrect information",
            "Partial understanding with significant gaps",
            "Explains the concept correctly with standard depth",
            "Deep understanding with practical examples",
            "Expert-level explanation with edge cases and trade-offs",
        ),
    },
    {
        "name": "Clarity",
        "weight": 0.3,
        "anchors": _anchors(
            "Explanation is confusing or disorganized",
            "Some clarity issues, hard to follow",
            "Clear and organized explanation",
            "Very clear with good structure and examples",
            "Exceptionally clear, could teach others effectively",
        ),
    },
    {
        "name": "Depth",
        "weight": 0.3,
        "anchors": _anchors(
            "Surface-level only",
            "Some depth but missing key details",
            "Appropriate depth for the question",
            "Goes beyond basics with insights",
            "Comprehensive with advanced insights",
        ),
    },
]

CODING_RUBRIC = [
    {
        "name": "Correctness",
        "weight": 0.35,
        "anchors": _anchors(
            "Solution does not work",
            "Works for basic cases only",
            "Works for all provided test cases",
            "Handles edge cases well",
            "Provably correct with clear reasoning",
        ),
    },
    {
        "name": "Efficiency",
        "weight": 0.25,
        "anchors": _anchors(
            "Very inefficient (brute force when better exists)",
            "Suboptimal but reasonable",
            "Meets expected complexity",
            "Optimized for both time and space",
            "Optimal with trade-off analysis",
        ),
    },
    {
        "name": "Code Quality",
        "weight": 0.2,
        "anchors": _anchors(
            "Unreadable, no structure",
            "Works but messy",
            "Clean and readable",
            "Well-structured with good naming",
            "Production-quality code",
        ),
    },
    {
        "name": "Communication",
        "weight": 0.2,
        "anchors": _anchors(
            "Cannot explain approach",
            "Explanation is incomplete",
            "Clearly explains solution",
            "Discusses alternatives",
            "Excellent problem-solving narration",
        ),
    },
]

SYSTEM_DESIGN_RUBRIC = [
    {
        "name": "Requirements",
        "weight": 0.2,
        "anchors": _anchors(
            "No requirements gathered",
            "Basic functional requirements only",
            "Good functional + some non-functional",
            "Comprehensive requirements with scale estimates",
            "Expert-level requirements analysis",
        ),
    },
    {
        "name": "High-Level Design",
        "weight": 0.3,
        "anchors": _anchors(
            "Missing or incorrect design",
            "Basic design with gaps",
            "Solid design covering main components",
            "Well-thought-out design with trade-offs",
            "Excellent design with alternatives discussed",
        ),
    },
    {
        "name": "Deep Dive",
        "weight": 0.3,
        "anchors": _anchors(
            "No technical depth",
            "Surface-level explanations",
            "Good depth on key components",
            "Strong technical details",
            "Expert-level depth with edge cases",
        ),
    },
    {
        "name": "Scalability",
        "weight": 0.2,
        "anchors": _anchors(
            "No scalability considerations",
            "Basic scaling mentioned",
            "Solid horizontal scaling plan",
            "Comprehensive scaling strategy",
            "Expert handling of scale challenges",
        ),
    },
]

FAILURE_STORY_RUBRIC = [
    {
        "name": "Authenticity",
        "weight": 0.25,
        "anchors": _anchors(
            "Vague or clearly fabricated",
            "Generic answer, lacks specifics",
            "Genuine story with good details",
            "Very authentic and vulnerable",
            "Deeply authentic with strong self-awareness",
        ),
    },
    {
        "name": "Accountability",
        "weight": 0.25,
        "anchors": _anchors(
            "Blames others entirely",
            "Deflects most responsibility",
            "Acknowledges their role",
            "Takes full ownership",
            "Models accountability beautifully",
        ),
    },
    {
        "name": "Learning",
        "weight": 0.25,
        "anchors": _anchors(
            "No learning demonstrated",
            "Superficial lessons",
            "Clear, meaningful takeaways",
            "Deep insights with behavior change",
            "Transformative learning, applied repeatedly",
        ),
    },
    {
        "name": "Communication",
        "weight": 0.25,
        "anchors": _anchors(
            "Rambling or unclear",
            "Some structure issues",
            "Well-structured response",
            "Compelling storytelling",
            "Exceptional clarity and impact",
        ),
    },
]

LEADERSHIP_RUBRIC = [
    {
        "name": "Leadership Approach",
        "weight": 0.3,
        "anchors": _anchors(
            "Tried to use non-existent authority",
            "Basic coordination only",
            "Good influence tactics",
            "Strong servant leadership",
            "Inspiring leadership through influence",
        ),
    },
    {
        "name": "Results",
        "weight": 0.3,
        "anchors": _anchors(
            "No outcome mentioned",
            "Unclear or poor outcome",
            "Positive results achieved",
            "Strong, measurable impact",
            "Exceptional results with lasting change",
        ),
    },
    {
        "name": "Self-Awareness",
        "weight": 0.2,
        "anchors": _anchors(
            "No reflection",
            "Surface-level awareness",
            "Good self-reflection",
            "Deep understanding of dynamics",
            "Exceptional insight into leadership style",
        ),
    },
    {
        "name": "Communication",
        "weight": 0.2,
        "anchors": _anchors(
            "Disorganized story",
            "Some clarity issues",
            "Clear STAR structure",
            "Engaging storytelling",
            "Masterful narrative",
        ),
    },
]


REACT_QUESTIONS: list[dict[str, Any]] = [
    {
        "type": "conceptual",
        "format": "text",
        "title": "What is the Virtual DOM?",
        "prompt": (
            "Explain what the Virtual DOM is in React and why it's used. "
            "How does it improve performance?"
        ),
        "hints": [
            "Think about what happens when state changes in a React app",
            "Consider the cost of direct DOM manipulation",
        ],
        "solution": {
            "explanation": (
                "The Virtual DOM is a lightweight JavaScript representation of the actual "
                "DOM. When state changes, React creates a new Virtual DOM tree and compares "
                "it with the previous one (diffing). Only the differences are applied to the "
                "real DOM (reconciliation), which is much faster than manipulating the DOM "
                "directly for every change."
            ),
            "key_points": [
                "In-memory representation of real DOM",
                "Diffing algorithm compares old and new trees",
                "Batch updates minimize DOM operations",
                "Reconciliation process applies minimal changes",
            ],
        },
        "rubric": CONCEPTUAL_RUBRIC,
        "difficulty": "intermediate",
        "technologies": ["react", "javascript"],
        "company_tags": ["meta", "google", "amazon"],
        "topic_tags": ["virtual-dom", "performance", "reconciliation"],
        "time_estimate_minutes": 5,
    },
    {
        "type": "conceptual",
        "format": "text",
        "title": "useState vs useReducer",
        "prompt": (
            "When would you use useReducer instead of useState? Provide examples of "
            "scenarios where each is more appropriate."
        ),
        "hints": [
            "Consider complexity of state updates",
            "Think about related state values",
        ],
        "solution": {
            "explanation": (
                "useState is ideal for simple, independent state values. useReducer is "
                "better for complex state logic with multiple sub-values, when next state "
                "depends on previous state, or when you want to optimize performance by "
                "passing dispatch down instead of callbacks."
            ),
            "key_points": [
                "useState: simple values, independent updates",
                "useReducer: complex objects, related values",
                "useReducer: state machine-like logic",
                "useReducer: better for testing (pure reducer functions)",
            ],
        },
        "rubric": CONCEPTUAL_RUBRIC,
        "difficulty": "intermediate",
        "technologies": ["react", "javascript", "typescript"],
        "company_tags": ["meta", "airbnb"],
        "topic_tags": ["hooks", "state-management"],
        "time_estimate_minutes": 5,
    },
    {
        "type": "conceptual",
        "format": "text",
        "title": "React Server Components",
        "prompt": (
            "Explain React Server Components. How do they differ from traditional React "
            "components and Client Components?"
        ),
        "hints": [
            "Think about where the component renders",
            "Consider the bundle size implications",
        ],
        "solution": {
            "explanation": (
                "React Server Components (RSC) render on the server and send HTML to the "
                "client. They can't use hooks or browser APIs but can directly access "
                "backend resources. They reduce bundle size since their code never ships to "
                "the client. Client Components are the traditional React components that "
                "run in the browser."
            ),
            "key_points": [
                "Server Components render on server, not in browser",
                "Zero bundle size for Server Components",
                "Direct access to databases and file system",
                "Cannot use useState, useEffect, or browser APIs",
                "Use 'use client' directive for Client Components",
            ],
        },
        "rubric": CONCEPTUAL_RUBRIC,
        "difficulty": "advanced",
        "technologies": ["react", "nextjs", "typescript"],
        "company_tags": ["vercel", "meta"],
        "topic_tags": ["server-components", "rsc", "nextjs"],
        "time_estimate_minutes": 7,
    },
    {
        "type": "coding",
        "format": "code",
        "title": "Implement a Custom Hook: useDebounce",
        "prompt": (
            "Implement a custom React hook called useDebounce that debounces a value. "
            "The hook should take a value and delay (in ms) as parameters and return the "
            "debounced value.\n\n```typescript\n"
            "function useDebounce<T>(value: T, delay: number): T {\n"
            "  // Your implementation\n}\n```"
        ),
        "hints": [
            "You'll need useState and useEffect",
            "Remember to cleanup the timeout",
        ],
        "solution": {
            "explanation": (
                "The hook uses useState to store the debounced value and useEffect to "
                "update it after the delay. The cleanup function clears the timeout if the "
                "value changes before the delay completes."
            ),
            "code": (
                "function useDebounce<T>(value: T, delay: number): T {\n"
                "  const [debouncedValue, setDebouncedValue] = useState<T>(value);\n\n"
                "  useEffect(() => {\n"
                "    const timer = setTimeout(() => {\n"
                "      setDebouncedValue(value);\n"
                "    }, delay);\n\n"
                "    return () => {\n"
                "      clearTimeout(timer);\n"
                "    };\n"
                "  }, [value, delay]);\n\n"
                "  return debouncedValue;\n"
                "}"
            ),
            "key_points": [
                "Uses useState to store the debounced value",
                "useEffect runs on value or delay change",
                "Cleanup function prevents stale updates",
                "Generic type for flexibility",
            ],
        },
        "rubric": CODING_RUBRIC,
        "difficulty": "intermediate",
        "technologies": ["react", "typescript"],
        "company_tags": ["meta", "google", "stripe"],
        "topic_tags": ["hooks", "custom-hooks", "debounce"],
        "time_estimate_minutes": 10,
    },
    {
        "type": "conceptual",
        "format": "text",
        "title": "useMemo vs useCallback",
        "prompt": (
            "Explain the difference between useMemo and useCallback. "
            "When would you use each?"
        ),
        "hints": [
            "Think about what each returns",
            "Consider child component re-renders",
        ],
        "solution": {
            "explanation": (
                "useMemo memoizes a computed value (the result of a function), while "
                "useCallback memoizes a function itself. useMemo is for expensive "
                "calculations; useCallback is for stable function references passed to "
                "optimized child components."
            ),
            "key_points": [
                "useMemo returns memoized value",
                "useCallback returns memoized function",
                "useCallback(fn, deps) === useMemo(() => fn, deps)",
                "Both help prevent unnecessary re-renders",
                "Don't overuse - premature optimization",
            ],
        },
        "rubric": CONCEPTUAL_RUBRIC,
        "difficulty": "intermediate",
        "technologies": ["react", "javascript", "typescript"],
        "company_tags": ["meta", "netflix"],
        "topic_tags": ["hooks", "performance", "memoization"],
        "time_estimate_minutes": 5,
    },
]

JAVASCRIPT_QUESTIONS: list[dict[str, Any]] = [
    {
        "type": "conceptual",
        "format": "text",
        "title": "Explain the Event Loop",
        "prompt": (
            "Explain how the JavaScript event loop works. Include the call stack, task "
            "queue, and microtask queue in your explanation."
        ),
        "hints": [
            "Start with the call stack",
            "Think about where Promises go vs setTimeout",
        ],
        "solution": {
            "explanation": (
                "The event loop continuously checks if the call stack is empty. If empty, "
                "it processes all microtasks (Promise callbacks), then takes one task from "
                "the task queue (setTimeout, events). Microtasks have priority over tasks."
            ),
            "key_points": [
                "Call stack executes synchronous code",
                "Microtask queue: Promises, queueMicrotask, MutationObserver",
                "Task queue: setTimeout, setInterval, I/O, UI events",
                "Microtasks drain completely before next task",
                "Each task can spawn new microtasks",
            ],
        },
        "rubric": CONCEPTUAL_RUBRIC,
        "difficulty": "advanced",
        "technologies": ["javascript"],
        "company_tags": ["google", "meta", "amazon"],
        "topic_tags": ["event-loop", "async", "concurrency"],
        "time_estimate_minutes": 8,
    },
    {
        "type": "conceptual",
        "format": "text",
        "title": "What is a Closure?",
        "prompt": (
            "Explain what a closure is in JavaScript. Provide a practical example of when "
            "you would use one."
        ),
        "hints": [
            "Think about function scope",
            "Consider data privacy",
        ],
        "solution": {
            "explanation": (
                "A closure is a function that has access to its outer (enclosing) "
                "function's variables even after the outer function has returned. Closures "
                "are created every time a function is created."
            ),
            "code": (
                "function createCounter() {\n"
                "  let count = 0; // Private variable\n"
                "  return {\n"
                "    increment: () => ++count,\n"
                "    getCount: () => count\n"
                "  };\n"
                "}\n"
                "const counter = createCounter();\n"
                "counter.increment(); // 1\n"
                "counter.increment(); // 2"
            ),
            "key_points": [
                "Function retains access to outer scope",
                "Data encapsulation and privacy",
                "Used in module pattern, callbacks",
                "Each closure maintains its own scope",
            ],
        },
        "rubric": CONCEPTUAL_RUBRIC,
        "difficulty": "intermediate",
        "technologies": ["javascript"],
        "company_tags": ["google", "meta", "microsoft"],
        "topic_tags": ["closures", "scope", "functions"],
        "time_estimate_minutes": 5,
    },
    {
        "type": "coding",
        "format": "code",
        "title": "Implement Array.prototype.reduce",
        "prompt": (
            "Implement a polyfill for Array.prototype.reduce without using the built-in "
            "reduce method.\n\n```javascript\n"
            "Array.prototype.myReduce = function(callback, initialValue) {\n"
            "  // Your implementation\n}\n```"
        ),
        "hints": [
            "Handle the case when no initialValue is provided",
            "Remember to pass all 4 arguments to the callback",
        ],
        "solution": {
            "explanation": (
                "The implementation iterates through the array, calling the callback with "
                "accumulator, current value, index, and array. If no initial value is "
                "provided, the first element is used as the initial accumulator."
            ),
            "code": (
                "Array.prototype.myReduce = function(callback, initialValue) {\n"
                "  if (this.length === 0 && initialValue === undefined) {\n"
                "    throw new TypeError('Reduce of empty array with no initial value');\n"
                "  }\n\n"
                "  let accumulator = initialValue !== undefined ? initialValue : this[0];\n"
                "  const startIndex = initialValue !== undefined ? 0 : 1;\n\n"
                "  for (let i = startIndex; i < this.length; i++) {\n"
                "    accumulator = callback(accumulator, this[i], i, this);\n"
                "  }\n\n"
                "  return accumulator;\n"
                "};"
            ),
            "key_points": [
                "Handle empty array with no initial value",
                "Determine starting index based on initialValue",
                "Pass all 4 arguments to callback",
                "Return final accumulator",
            ],
        },
        "rubric": CODING_RUBRIC,
        "difficulty": "intermediate",
        "technologies": ["javascript"],
        "company_tags": ["meta", "amazon", "apple"],
        "topic_tags": ["arrays", "higher-order-functions", "polyfills"],
        "time_estimate_minutes": 12,
    },
]

SYSTEM_DESIGN_QUESTIONS: list[dict[str, Any]] = [
    {
        "type": "system_design",
        "format": "whiteboard",
        "title": "Design a URL Shortener",
        "prompt": (
            "Design a URL shortening service like bit.ly. Consider:\n"
            "- Functional requirements (shorten URL, redirect to original)\n"
            "- Non-functional requirements (high availability, low latency)\n"
            "- Scale (100M URLs, 1B redirects/day)\n\n"
            "Discuss your high-level design, database choice, and key algorithms."
        ),
        "hints": [
            "Think about how to generate unique short codes",
            "Consider read vs write ratio",
            "How would you handle hot URLs?",
        ],
        "solution": {
            "explanation": (
                "A URL shortener needs a way to generate unique short codes (base62 "
                "encoding of counter or random), a database for mappings (NoSQL for "
                "scale), caching for popular URLs, and potentially a distributed ID "
                "generator."
            ),
            "key_points": [
                "Base62 encoding for short URLs (a-z, A-Z, 0-9)",
                "Key-value store (Redis, DynamoDB) for speed",
                "Cache layer for hot URLs (90% reads)",
                "Counter or hash-based ID generation",
                "Consider analytics requirements",
                "CDN for redirect performance",
            ],
        },
        "rubric": SYSTEM_DESIGN_RUBRIC,
        "difficulty": "intermediate",
        "technologies": ["general"],
        "company_tags": ["google", "amazon", "meta", "microsoft"],
        "topic_tags": ["url-shortener", "distributed-systems", "caching"],
        "time_estimate_minutes": 45,
    },
]

BEHAVIORAL_QUESTIONS: list[dict[str, Any]] = [
    {
        "type": "behavioral",
        "format": "voice",
        "title": "Tell me about a time you failed",
        "prompt": (
            "Describe a significant failure in your professional career. What happened, "
            "what did you learn, and how did it change your approach?"
        ),
        "hints": [
            "Choose a real, meaningful failure",
            "Focus more on what you learned",
            "Show growth and self-awareness",
        ],
        "solution": {
            "explanation": (
                "Strong answers demonstrate self-awareness, accountability, and growth. "
                "Use the STAR method: Situation (20%), Task (10%), Action (60%), Result "
                "(10% - focused on learning)."
            ),
            "key_points": [
                "Be honest about a real failure",
                "Take personal responsibility",
                "Emphasize specific lessons learned",
                "Show how you've applied those lessons",
                "Demonstrate growth mindset",
            ],
        },
        "rubric": FAILURE_STORY_RUBRIC,
        "difficulty": "intermediate",
        "technologies": ["general"],
        "company_tags": ["amazon", "google", "meta", "microsoft"],
        "topic_tags": ["failure", "growth", "self-awareness"],
        "time_estimate_minutes": 5,
    },
    {
        "type": "behavioral",
        "format": "voice",
        "title": "Leadership without authority",
        "prompt": (
            "Tell me about a time when you had to lead a project or initiative without "
            "having formal authority over the team members."
        ),
        "hints": [
            "Focus on influence, not control",
            "Describe specific actions you took",
            "What was the outcome?",
        ],
        "solution": {
            "explanation": (
                "This tests your ability to influence without power. Strong answers show "
                "coalition building, clear communication of vision, empathy, and achieving "
                "results through collaboration."
            ),
            "key_points": [
                "Establish credibility through expertise",
                "Build relationships and trust",
                "Create shared vision and goals",
                "Remove obstacles for others",
                "Celebrate team wins",
            ],
        },
        "rubric": LEADERSHIP_RUBRIC,
        "difficulty": "intermediate",
        "technologies": ["general"],
        "company_tags": ["amazon", "google", "meta", "microsoft"],
        "topic_tags": ["leadership", "influence", "collaboration"],
        "time_estimate_minutes": 5,
    },
]

ALL_SEED_QUESTIONS = [
    *REACT_QUESTIONS,
    *JAVASCRIPT_QUESTIONS,
    *SYSTEM_DESIGN_QUESTIONS,
    *BEHAVIORAL_QUESTIONS,
]


def skill_slug(entry: dict[str, Any]) -> str:
    """Skill a seed entry belongs to, e.g. ``react`` or ``system-design``."""
    technology = entry["technologies"][0]
    if technology == "general":
        return entry["type"].replace("_", "-")
    return technology


def _seed_uuid(kind: str, name: str) -> str:
    return str(uuid.uuid5(SEED_NAMESPACE, f"{kind}:{name}"))


SKILL_IDS: dict[str, str] = {
    slug: _seed_uuid("skill", slug) for slug in dict.fromkeys(map(skill_slug, ALL_SEED_QUESTIONS))
}


def load_seed_questions() -> list[Question]:
    """Build catalog records for every seed entry.

    Entries are timestamped one minute apart in declaration order, so the
    newest-first listing is stable.
    """
    return [
        Question(
            id=_seed_uuid("question", entry["title"]),
            skill_id=SKILL_IDS[skill_slug(entry)],
            created_at=SEED_CREATED_AT + timedelta(minutes=index),
            **entry,
        )
        for index, entry in enumerate(ALL_SEED_QUESTIONS)
    ]
