"""Chat API resource - answer questions over indexed documents."""

import falcon
import falcon.asgi

from semrag.application.use_cases.answer.answer_question import AnswerQuestionUseCase
from semrag.domain.exceptions import ProviderError, ValidationError


class ChatResource:
    """POST /v1/chat - {question, document?} -> {success, answer}."""

    def __init__(self, answer_question: AnswerQuestionUseCase) -> None:
        self._answer_question = answer_question

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            body = await req.get_media()
        except falcon.MediaMalformedError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid request body"}
            return
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid request body"}
            return

        question = body.get("question")
        if not question or not isinstance(question, str):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Question is required and must be a string"}
            return
        document = body.get("document")
        if not isinstance(document, str):
            document = None

        try:
            answer = await self._answer_question.execute(question, document)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except ProviderError as e:
            resp.status = falcon.HTTP_500
            resp.media = {"error": "Failed to generate answer", "details": str(e)}
            return

        resp.media = {"success": True, "answer": answer}
        resp.status = falcon.HTTP_200
