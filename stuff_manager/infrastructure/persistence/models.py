from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, registry

from stuff_manager.domain.models.stuff import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH

table_registry = registry()


@table_registry.mapped_as_dataclass
class Stuff:
    __tablename__ = "stuffs"

    id: Mapped[int] = mapped_column(init=False, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    description: Mapped[str] = mapped_column(String(DESCRIPTION_MAX_LENGTH), nullable=False, default="")
