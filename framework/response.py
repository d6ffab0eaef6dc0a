from typing import Any, Optional
from pydantic import BaseModel
from framework.repository.paging import Page

class ResponseModel(BaseModel):
    code: int = 200
    message: str = "success"
    data: Optional[Any] = None

    @staticmethod
    def success(data: Any = None):
        return {"code": 200, "message": "success", "data": data}

    @staticmethod
    def fail(code: int = 400, message: str = "error", data: Any = None):
        return {"code": code, "message": message, "data": data}

    @staticmethod
    def page(page: Page):
        """Success envelope carrying page content plus paging metadata."""
        return ResponseModel.success(data=page.to_dict())
