"""Request orchestration shared by every controller.

A controller action validates its input, checks existence, calls the
repository, maps the result and answers with a response. Anything that
escapes is logged here and answered with a generic 500, so fault details
never reach the client.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError
from starlette.responses import JSONResponse, Response

from src.bookstore.core.services.mapping import EntityMapper
from src.bookstore.entities._base import EntityTable, Schema
from src.bookstore.entities._repository import Repository

if TYPE_CHECKING:
    from loguru import Logger

GENERIC_ERROR_MESSAGE = "Something went wrong. Please contact the Administrator"

RowT = TypeVar("RowT", bound=EntityTable)
ReadT = TypeVar("ReadT", bound=Schema)


def bad_request(detail: str, errors: Sequence[Any] | None = None) -> JSONResponse:
    content: dict[str, Any] = {"detail": detail}
    if errors:
        content["errors"] = jsonable_encoder(errors)
    return JSONResponse(content, status_code=400)


def validation_errors(exc: ValidationError) -> list[dict[str, Any]]:
    """Field-level errors without the submitted values."""
    return exc.errors(include_url=False, include_context=False, include_input=False)


class BaseController:
    """Naming and failure handling common to all controllers."""

    name: ClassVar[str]

    def __init__(self, log: Logger) -> None:
        self._log = log

    def _location(self, action: str) -> str:
        return f"{self.name} - {action}"

    def _internal_error(self, message: str, exc: BaseException | None = None) -> JSONResponse:
        if exc is not None:
            self._log.opt(exception=exc).error("{}: {}", message, exc)
        else:
            self._log.error(message)
        return JSONResponse({"detail": GENERIC_ERROR_MESSAGE}, status_code=500)


class CrudController(BaseController, Generic[RowT, ReadT]):
    """List/Get/Create/Update/Delete over one entity type."""

    create_schema: ClassVar[type[Schema]]
    update_schema: ClassVar[type[Schema]]
    resource_path: ClassVar[str]

    def __init__(
        self,
        repository: Repository[RowT],
        mapper: EntityMapper[RowT, ReadT],
        log: Logger,
    ) -> None:
        super().__init__(log)
        self._repository = repository
        self._mapper = mapper

    def check_references(self, dto: Schema) -> list[dict[str, Any]]:
        """Validate foreign keys of ``dto``; return field errors, empty when valid."""
        return []

    def list(self) -> Response:
        location = self._location("List")
        try:
            self._log.info("{}: Attempted Call", location)
            rows = self._repository.find_all()
            items = self._mapper.to_read_list(rows)
            self._log.info("{}: Successful", location)
            return JSONResponse([item.to_json() for item in items])
        except Exception as exc:
            return self._internal_error(location, exc)

    def get(self, item_id: int) -> Response:
        location = self._location("Get")
        try:
            self._log.info("{}: Attempted Call for id: {}", location, item_id)
            row = self._repository.find_by_id(item_id)
            if row is None:
                self._log.warning("{}: Failed to retrieve record with id: {}", location, item_id)
                return Response(status_code=404)
            item = self._mapper.to_read(row)
            self._log.info("{}: Successfully got record with id: {}", location, item_id)
            return JSONResponse(item.to_json())
        except Exception as exc:
            return self._internal_error(location, exc)

    def create(self, payload: dict[str, Any] | None) -> Response:
        location = self._location("Create")
        try:
            self._log.info("{}: Create Attempted", location)
            if payload is None:
                self._log.warning("{}: Empty request was submitted", location)
                return bad_request("Request body is required")
            try:
                dto = self.create_schema.model_validate(payload)
            except ValidationError as exc:
                self._log.warning("{}: Data was Incomplete", location)
                return bad_request("Data was incomplete", validation_errors(exc))

            reference_errors = self.check_references(dto)
            if reference_errors:
                self._log.warning("{}: Data referenced missing records", location)
                return bad_request("Data referenced missing records", reference_errors)

            row = self._mapper.to_row(dto)
            result = self._repository.create(row)
            if not result:
                return self._internal_error(f"{location}: Creation Failed - {result.message}")

            created = self._mapper.to_read(row)
            self._log.info("{}: Creation was Successful for id: {}", location, row.id)
            return JSONResponse(
                created.to_json(),
                status_code=201,
                headers={"Location": f"{self.resource_path}/{row.id}"},
            )
        except Exception as exc:
            return self._internal_error(location, exc)

    def update(self, item_id: int, payload: dict[str, Any] | None) -> Response:
        location = self._location("Update")
        try:
            self._log.info("{}: Update Attempted on record with id: {}", location, item_id)
            if item_id < 1 or payload is None or payload.get("id") != item_id:
                self._log.warning("{}: Update failed with bad data - id: {}", location, item_id)
                return bad_request("Path id must be positive and match the body id")

            if not self._repository.exists(item_id):
                self._log.warning("{}: Failed to retrieve record with id: {}", location, item_id)
                return Response(status_code=404)

            try:
                dto = self.update_schema.model_validate(payload)
            except ValidationError as exc:
                self._log.warning("{}: Data was Incomplete", location)
                return bad_request("Data was incomplete", validation_errors(exc))

            reference_errors = self.check_references(dto)
            if reference_errors:
                self._log.warning("{}: Data referenced missing records", location)
                return bad_request("Data referenced missing records", reference_errors)

            row = self._mapper.to_row(dto)
            result = self._repository.update(row)
            if not result:
                return self._internal_error(
                    f"{location}: Update Failed for record with id: {item_id} - {result.message}"
                )

            self._log.info("{}: Record with id: {} successfully Updated", location, item_id)
            return Response(status_code=204)
        except Exception as exc:
            return self._internal_error(location, exc)

    def delete(self, item_id: int) -> Response:
        location = self._location("Delete")
        try:
            self._log.info("{}: Delete attempted on record with id: {}", location, item_id)
            if item_id < 1:
                self._log.warning("{}: Delete failed with bad data - id: {}", location, item_id)
                return bad_request("Id must be positive")

            if not self._repository.exists(item_id):
                self._log.warning("{}: Failed to retrieve record with id: {}", location, item_id)
                return Response(status_code=404)

            row = self._repository.find_by_id(item_id)
            if row is None:
                # Removed by another request since the existence check
                self._log.warning("{}: Record with id: {} disappeared", location, item_id)
                return Response(status_code=404)

            result = self._repository.delete(row)
            if not result:
                return self._internal_error(
                    f"{location}: Delete failed for record with id: {item_id} - {result.message}"
                )

            self._log.info("{}: Record with id: {} successfully Deleted", location, item_id)
            return Response(status_code=204)
        except Exception as exc:
            return self._internal_error(location, exc)
