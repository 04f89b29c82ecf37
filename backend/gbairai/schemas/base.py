"""
GBAIRAI - Schema Base
Modèle de base: champs snake_case en Python, camelCase dans le JSON
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Modèle sérialisé en camelCase, accepte aussi les noms Python"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
