"""Application entry point and composition root."""

import argparse
import asyncio
import sys
from dataclasses import dataclass

from falcon.asgi import App
from psycopg_pool import AsyncConnectionPool

from semrag import __version__
from semrag.application.use_cases.answer.answer_question import AnswerQuestionUseCase
from semrag.application.use_cases.ingestion.ingest_directory import (
    IngestDirectoryUseCase,
)
from semrag.application.use_cases.ingestion.ingest_documents import (
    IngestDocumentsUseCase,
)
from semrag.config import Settings, get_settings
from semrag.domain.exceptions import SemRAGError
from semrag.infrastructure.chunking.recursive_chunker import RecursiveChunker
from semrag.infrastructure.chunking.semantic_chunker import SemanticChunker
from semrag.infrastructure.documents.directory import DocumentDirectory
from semrag.infrastructure.embedding.openai_provider import OpenAIEmbeddingProvider
from semrag.infrastructure.llm.openai_provider import OpenAIChatProvider
from semrag.infrastructure.persistence.postgres.connection import create_pool
from semrag.infrastructure.persistence.postgres.vector_store import PgVectorStore
from semrag.interfaces.api.app import create_app
from semrag.interfaces.api.middleware.cors import CORSMiddleware
from semrag.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from semrag.interfaces.api.resources.chat import ChatResource
from semrag.interfaces.api.resources.documents import DocumentsResource
from semrag.interfaces.api.resources.health import HealthResource
from semrag.interfaces.api.resources.ingest import IngestResource, ingestion_to_dict
from semrag.log import configure_logging


@dataclass
class Container:
    """Wired application services."""

    pool: AsyncConnectionPool
    document_directory: DocumentDirectory
    ingest_directory: IngestDirectoryUseCase
    answer_question: AnswerQuestionUseCase


def build_container(settings: Settings) -> Container:
    """Construct providers and use cases from settings."""
    settings.require_api_key()
    pool = create_pool(settings.database_url)
    embedding_provider = OpenAIEmbeddingProvider(
        base_url=settings.llm_api_url,
        api_key=settings.llm_api_key,
        model=settings.embedding_model,
    )
    llm_provider = OpenAIChatProvider(
        base_url=settings.llm_api_url,
        api_key=settings.llm_api_key,
        model=settings.chat_model,
        temperature=settings.llm_temperature,
    )
    vector_store = PgVectorStore(pool, embedding_provider)
    document_directory = DocumentDirectory(settings.docs_dir)

    ingest_documents = IngestDocumentsUseCase(
        semantic_chunker=SemanticChunker(embedding_provider),
        fallback_chunker=RecursiveChunker(),
        vector_store=vector_store,
        default_config=settings.chunking_config(),
    )
    return Container(
        pool=pool,
        document_directory=document_directory,
        ingest_directory=IngestDirectoryUseCase(document_directory, ingest_documents),
        answer_question=AnswerQuestionUseCase(
            vector_store=vector_store,
            llm_provider=llm_provider,
            top_k=settings.top_k,
            answer_mode=settings.answer_mode,
        ),
    )


def create_semrag_app(settings: Settings | None = None) -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    container = build_container(settings)
    return create_app(
        documents_resource=DocumentsResource(
            container.document_directory, container.ingest_directory
        ),
        ingest_resource=IngestResource(container.ingest_directory),
        chat_resource=ChatResource(container.answer_question),
        health_resource=HealthResource(container.pool),
        middleware=[
            CORSMiddleware(settings.cors_origin_list()),
            PoolLifespanMiddleware(container.pool),
        ],
    )


def run_server(host: str, port: int) -> None:
    """Run uvicorn server."""
    import uvicorn

    uvicorn.run(create_semrag_app(), host=host, port=port)


async def _ingest(container: Container) -> dict:
    async with container.pool:
        result = await container.ingest_directory.execute()
    return ingestion_to_dict(result)


async def _ask(container: Container, question: str, document: str | None) -> str:
    async with container.pool:
        return await container.answer_question.execute(question, document)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="semrag", description="Document question answering")
    parser.add_argument("--version", action="version", version=f"semrag {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000)

    sub.add_parser("ingest", help="Chunk and index the docs directory")

    ask = sub.add_parser("ask", help="Answer a question")
    ask.add_argument("question")
    ask.add_argument("--document", default=None, help="Restrict retrieval to one document")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = _build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)
    try:
        if args.command == "serve":
            run_server(args.host, args.port)
            return 0
        container = build_container(settings)
        if args.command == "ingest":
            summary = asyncio.run(_ingest(container))
            print(summary["message"])
            for key, value in summary["stats"].items():
                print(f"  {key}: {value}")
            for error in summary["errors"]:
                print(f"  failed: {error['filename']}: {error['error']}")
        else:
            print(asyncio.run(_ask(container, args.question, args.document)))
    except SemRAGError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
