"""API routes for correcting a student's profile URL."""

import secrets
from typing import Annotated

from litestar import Controller, MediaType, Response, get, post
from litestar.datastructures import State
from litestar.enums import RequestEncodingType
from litestar.exceptions import NotFoundException, PermissionDeniedException, ValidationException
from litestar.params import Body
from litestar.status_codes import HTTP_200_OK
from loguru import logger
from pydantic import ValidationError

from api.schemas.profile import ProfileUpdateRequest, ProfileUpdateResponse

ADMIN_FORM = """<!DOCTYPE html>
<html>
<head><title>Change LeetCode URL</title></head>
<body>
  <h1>Change LeetCode URL</h1>
  <form method="post" action="/dataChange">
    <label>Roll number <input name="rollNumber" required></label><br>
    <label>LeetCode URL <input name="leetcodeUrl" required></label><br>
    <label>Password <input name="password" type="password" required></label><br>
    <button type="submit">Update</button>
  </form>
</body>
</html>
"""


def _password_matches(expected: str | None, given: str) -> bool:
    if not expected:
        return False
    return secrets.compare_digest(expected.encode(), given.encode())


class ProfileController(Controller):
    """Controller for the manual profile URL correction."""

    path = "/dataChange"

    @get("/", media_type=MediaType.HTML)
    async def get_form(self) -> str:
        return ADMIN_FORM

    @post("/", status_code=HTTP_200_OK)
    async def change_profile(
        self,
        state: State,
        data: Annotated[dict[str, str], Body(media_type=RequestEncodingType.URL_ENCODED)],
    ) -> ProfileUpdateResponse:
        """
        Replace a student's profile URL and refresh their record.

        Form fields:
        - rollNumber: Roster identifier
        - leetcodeUrl: New profile URL
        - password: Shared admin password
        """
        try:
            form = ProfileUpdateRequest.model_validate(data)
        except ValidationError as e:
            raise ValidationException(f"Invalid profile update form: {e}") from e

        if not _password_matches(state.settings.admin_password, form.password):
            logger.warning(f"Rejected profile update for {form.roll_number}: wrong password")
            raise PermissionDeniedException("Wrong password")

        logger.info(f"API request to change URL: roll={form.roll_number} url={form.leetcode_url}")

        result = await state.update_service.update_profile(form.roll_number, form.leetcode_url)
        if not result.found:
            raise NotFoundException("Wrong Roll")

        solved = result.total_solved if result.total_solved is not None else -1
        return ProfileUpdateResponse(
            status=result.status.value,
            dataset=result.dataset,
            name=result.name,
            total_solved=result.total_solved,
            message=f"URL changed for {result.name} with new Problems solved = {solved}",
        )
