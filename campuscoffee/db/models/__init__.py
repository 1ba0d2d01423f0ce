from campuscoffee.db.models.pos import Pos

__all__ = ["Pos"]
