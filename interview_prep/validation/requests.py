"""Composite validators for the mutating API endpoints.

Each validator walks a fixed request shape field by field and returns on the
first failure; errors are never aggregated. Optional fields are validated
only when their key is present in the payload and are never defaulted.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, NotRequired, TypedDict

from interview_prep.validation.primitives import (
    string_items,
    validate_array,
    validate_enum,
    validate_number,
    validate_string,
    validate_uuid,
)
from interview_prep.validation.result import Invalid, Valid, ValidationResult

QuestionType = Literal["conceptual", "coding", "system_design", "behavioral", "practical"]
QuestionFormat = Literal["text", "voice", "code", "whiteboard"]
DifficultyLevel = Literal["beginner", "intermediate", "advanced", "expert"]

QUESTION_TYPES: tuple[str, ...] = (
    "conceptual",
    "coding",
    "system_design",
    "behavioral",
    "practical",
)
QUESTION_FORMATS: tuple[str, ...] = ("text", "voice", "code", "whiteboard")
DIFFICULTY_LEVELS: tuple[str, ...] = ("beginner", "intermediate", "advanced", "expert")

ANCHOR_KEYS: tuple[str, ...] = ("1", "2", "3", "4", "5")

BODY_NOT_OBJECT = "Request body must be an object"


class EvaluateRequest(TypedDict):
    questionId: str
    response: str
    rubric: dict[str, Any] | list[Any]
    type: str


class SaveResponseRequest(TypedDict):
    question_id: str
    session_id: NotRequired[str]
    response_text: NotRequired[str]
    response_code: NotRequired[str]
    time_spent_seconds: NotRequired[float]
    overall_score: NotRequired[float]
    evaluation: NotRequired[dict[str, Any]]


class Solution(TypedDict):
    explanation: str
    key_points: list[str]
    code: NotRequired[str]


class RubricDimension(TypedDict):
    name: str
    weight: float
    anchors: dict[str, str]


class CreateQuestionRequest(TypedDict):
    skill_id: str
    type: QuestionType
    format: QuestionFormat
    title: str
    prompt: str
    difficulty: DifficultyLevel
    hints: NotRequired[list[str]]
    solution: NotRequired[Solution]
    technologies: NotRequired[list[str]]
    company_tags: NotRequired[list[str]]
    topic_tags: NotRequired[list[str]]
    time_estimate_minutes: NotRequired[float]
    rubric: NotRequired[list[RubricDimension]]


def validate_evaluate_request(body: Any) -> ValidationResult[EvaluateRequest]:
    """Validate the payload of an answer-evaluation request.

    ``rubric`` is passed through untouched once it is known to be a
    non-null object (or array); the scoring prompt consumes it as-is.
    """
    if not isinstance(body, Mapping):
        return Invalid(BODY_NOT_OBJECT)

    question_id = validate_uuid(body.get("questionId"), "questionId")
    if isinstance(question_id, Invalid):
        return question_id

    response = validate_string(body.get("response"), "response", min_length=1, max_length=50000)
    if isinstance(response, Invalid):
        return response

    rubric = body.get("rubric")
    if not isinstance(rubric, (Mapping, list)):
        return Invalid("rubric must be an object")

    question_type = validate_string(body.get("type"), "type")
    if isinstance(question_type, Invalid):
        return question_type

    return Valid(
        EvaluateRequest(
            questionId=question_id.data,
            response=response.data,
            rubric=rubric if isinstance(rubric, list) else dict(rubric),
            type=question_type.data,
        )
    )


def validate_save_response_request(body: Any) -> ValidationResult[SaveResponseRequest]:
    """Validate the payload used to store a practice response."""
    if not isinstance(body, Mapping):
        return Invalid(BODY_NOT_OBJECT)

    question_id = validate_uuid(body.get("question_id"), "question_id")
    if isinstance(question_id, Invalid):
        return question_id

    data = SaveResponseRequest(question_id=question_id.data)

    if "session_id" in body:
        session_id = validate_uuid(body["session_id"], "session_id")
        if isinstance(session_id, Invalid):
            return session_id
        data["session_id"] = session_id.data

    for key in ("response_text", "response_code"):
        if key in body:
            text = validate_string(body[key], key, max_length=100000)
            if isinstance(text, Invalid):
                return text
            data[key] = text.data  # type: ignore[literal-required]

    if "time_spent_seconds" in body:
        time_spent = validate_number(
            body["time_spent_seconds"], "time_spent_seconds", min_value=0, max_value=86400
        )
        if isinstance(time_spent, Invalid):
            return time_spent
        data["time_spent_seconds"] = time_spent.data

    if "overall_score" in body:
        score = validate_number(body["overall_score"], "overall_score", min_value=0, max_value=1)
        if isinstance(score, Invalid):
            return score
        data["overall_score"] = score.data

    evaluation = body.get("evaluation")
    if evaluation is not None:
        if not isinstance(evaluation, Mapping):
            return Invalid("evaluation must be an object")
        # Structure is owned by the scoring service; only the type is checked.
        data["evaluation"] = dict(evaluation)

    return Valid(data)


def _validate_solution(solution: Any) -> ValidationResult[Solution]:
    if not isinstance(solution, Mapping):
        return Invalid("solution must be an object")

    explanation = validate_string(
        solution.get("explanation"), "solution.explanation", max_length=50000
    )
    if isinstance(explanation, Invalid):
        return explanation

    key_points = validate_array(
        solution.get("key_points"),
        "solution.key_points",
        string_items("key_points", max_length=1000),
        min_length=1,
        max_length=20,
    )
    if isinstance(key_points, Invalid):
        return key_points

    data = Solution(explanation=explanation.data, key_points=key_points.data)

    if "code" in solution:
        code = validate_string(solution["code"], "solution.code", max_length=100000)
        if isinstance(code, Invalid):
            return code
        data["code"] = code.data

    return Valid(data)


def _lookup_anchor(anchors: Mapping[Any, Any], key: str) -> Any:
    """Fetch an anchor by its string key, accepting integer keys too."""
    if key in anchors:
        return anchors[key]
    return anchors.get(int(key))


def _validate_rubric(rubric: Any) -> ValidationResult[list[RubricDimension]]:
    if not isinstance(rubric, list):
        return Invalid("rubric must be an array")

    dimensions: list[RubricDimension] = []
    for index, item in enumerate(rubric):
        path = f"rubric[{index}]"
        if not isinstance(item, Mapping):
            return Invalid(f"{path} must be an object")

        name = validate_string(item.get("name"), f"{path}.name", max_length=100)
        if isinstance(name, Invalid):
            return name

        weight = validate_number(item.get("weight"), f"{path}.weight", min_value=0, max_value=1)
        if isinstance(weight, Invalid):
            return weight

        anchors = item.get("anchors")
        if not isinstance(anchors, Mapping):
            return Invalid(f"{path}.anchors must be an object")

        validated_anchors: dict[str, str] = {}
        for key in ANCHOR_KEYS:
            anchor = validate_string(
                _lookup_anchor(anchors, key), f"{path}.anchors.{key}", max_length=500
            )
            if isinstance(anchor, Invalid):
                return anchor
            validated_anchors[key] = anchor.data

        dimensions.append(
            RubricDimension(name=name.data, weight=weight.data, anchors=validated_anchors)
        )

    return Valid(dimensions)


def validate_create_question_request(body: Any) -> ValidationResult[CreateQuestionRequest]:
    """Validate the payload used to add a question to the catalog.

    Required fields are checked in declaration order (skill_id, type,
    format, title, prompt, difficulty), then each optional block in turn.
    """
    if not isinstance(body, Mapping):
        return Invalid(BODY_NOT_OBJECT)

    skill_id = validate_uuid(body.get("skill_id"), "skill_id")
    if isinstance(skill_id, Invalid):
        return skill_id

    question_type = validate_enum(body.get("type"), "type", QUESTION_TYPES)
    if isinstance(question_type, Invalid):
        return question_type

    question_format = validate_enum(body.get("format"), "format", QUESTION_FORMATS)
    if isinstance(question_format, Invalid):
        return question_format

    title = validate_string(body.get("title"), "title", min_length=3, max_length=500)
    if isinstance(title, Invalid):
        return title

    prompt = validate_string(body.get("prompt"), "prompt", min_length=10, max_length=50000)
    if isinstance(prompt, Invalid):
        return prompt

    difficulty = validate_enum(body.get("difficulty"), "difficulty", DIFFICULTY_LEVELS)
    if isinstance(difficulty, Invalid):
        return difficulty

    data = CreateQuestionRequest(
        skill_id=skill_id.data,
        type=question_type.data,  # type: ignore[typeddict-item]
        format=question_format.data,  # type: ignore[typeddict-item]
        title=title.data,
        prompt=prompt.data,
        difficulty=difficulty.data,  # type: ignore[typeddict-item]
    )

    if "hints" in body:
        hints = validate_array(
            body["hints"], "hints", string_items("hints", max_length=1000), max_length=10
        )
        if isinstance(hints, Invalid):
            return hints
        data["hints"] = hints.data

    if body.get("solution") is not None:
        solution = _validate_solution(body["solution"])
        if isinstance(solution, Invalid):
            return solution
        data["solution"] = solution.data

    # (field, max items, max chars per item)
    tag_limits = (
        ("technologies", 20, 50),
        ("company_tags", 50, 100),
        ("topic_tags", 50, 100),
    )
    for key, max_items, max_chars in tag_limits:
        if key in body:
            tags = validate_array(
                body[key], key, string_items(key, max_length=max_chars), max_length=max_items
            )
            if isinstance(tags, Invalid):
                return tags
            data[key] = tags.data  # type: ignore[literal-required]

    if "time_estimate_minutes" in body:
        estimate = validate_number(
            body["time_estimate_minutes"], "time_estimate_minutes", min_value=1, max_value=480
        )
        if isinstance(estimate, Invalid):
            return estimate
        data["time_estimate_minutes"] = estimate.data

    if "rubric" in body:
        rubric = _validate_rubric(body["rubric"])
        if isinstance(rubric, Invalid):
            return rubric
        data["rubric"] = rubric.data

    return Valid(data)
