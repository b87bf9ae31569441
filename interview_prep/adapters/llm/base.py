from abc import ABC, abstractmethod
from typing import Any


class AbstractLLMClient(ABC):
	"""Model backend used to score answers; always answers with one JSON object."""

	@abstractmethod
	async def generate_json(
		self,
		prompt: str,
		*,
		system: str | None = None,
		schema: dict[str, Any] | None = None,
		**kwargs: Any,
	) -> dict[str, Any]:
		"""Send one chat turn and decode the reply as a JSON object.

		Args:
			prompt: User turn, e.g. the candidate's answer.
			system: Instructions for the model. Implementations use their own
				"JSON only" instruction when this is None.
			schema: JSON schema of the expected object. Passing one switches
				the provider into JSON output mode.
			**kwargs: Sampling options such as temperature or max_tokens.

		Returns:
			The decoded object.

		Raises:
			RuntimeError: On transport failures, empty replies, or replies that
				are not a JSON object.
		"""
		...
