from .local_taxonomy import LocalTaxonomy, UnknownRolePresetError, get_default_taxonomy_provider
from .provider import SynonymProvider
from .synonyms import (
    SynonymMap,
    build_skill_clusters,
    expand_keywords,
    expand_with_synonyms,
    get_skill_clusters,
    merge_synonyms,
)

__all__ = [
    "SynonymProvider",
    "LocalTaxonomy",
    "UnknownRolePresetError",
    "get_default_taxonomy_provider",
    "SynonymMap",
    "merge_synonyms",
    "expand_keywords",
    "expand_with_synonyms",
    "build_skill_clusters",
    "get_skill_clusters",
]
