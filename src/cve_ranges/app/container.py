from __future__ import annotations

import logging

from dependency_injector import containers, providers

from ..core.usecases.check_round_trip import RoundTripCheckUseCase
from ..core.usecases.convert_report import ConvertReportUseCase
from ..core.usecases.reconstruct_timeline import ReconstructTimelineUseCase
from ..infra.json_documents import JsonDocumentAdapter
from ..config.settings import AppConfig

logger = logging.getLogger(__name__)


def documents_resource(collection_url):
	logger.debug(f"Initializing JSON document adapter (collection_url={collection_url})")
	yield JsonDocumentAdapter(collection_url=collection_url)
	logger.debug("JSON document adapter released")


class Container(containers.DeclarativeContainer):
	config = providers.Configuration(pydantic_settings=[AppConfig()])

	documents = providers.Resource(
		documents_resource,
		collection_url=config.collection_url,
	)

	convert_uc = providers.Factory(ConvertReportUseCase, source=documents)
	reconstruct_uc = providers.Factory(
		ReconstructTimelineUseCase,
		source=documents,
		assumed_default=config.assumed_default_status,
	)
	check_uc = providers.Factory(RoundTripCheckUseCase, source=documents, lint=config.lint)
