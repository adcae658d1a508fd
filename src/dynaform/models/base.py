"""
Clase base para modelos Pydantic.

Los documentos JSON del servicio usan nombres camelCase; los atributos
Python usan snake_case. Ambos nombres se aceptan al parsear.
"""

from pydantic import BaseModel, ConfigDict


class WireModel(BaseModel):
    """
    Modelo base para estructuras que cruzan la frontera con el servicio.

    Proporciona:
    - populate_by_name: acepta alias camelCase y nombre Python
    - to_wire(): serializa usando los alias camelCase
    """

    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict:
        """Serializa el modelo con nombres camelCase, omitiendo nulos."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
