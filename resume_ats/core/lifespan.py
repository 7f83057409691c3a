from contextlib import asynccontextmanager
import logging

from resume_ats.core.config.scoring import get_scoring_config
from resume_ats.taxonomy import get_default_taxonomy_provider

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    config = get_scoring_config()
    taxonomy = get_default_taxonomy_provider()
    logger.info(
        "ats_scoring_ready synonyms=%s presets=%s config_sections=%s",
        len(taxonomy.synonyms()),
        len(taxonomy.role_presets()),
        sorted(config),
    )
    yield
