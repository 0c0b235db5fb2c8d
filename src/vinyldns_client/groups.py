from .base import _VinylDNSClientBase
from .models import Group, GroupAdmins, GroupChanges, GroupMembers, Groups, User


class _GroupOperations(_VinylDNSClientBase):
    async def list_groups(self) -> list[Group]:
        groups = await self._request_model(Groups, "GET", "/groups")
        return groups.groups

    async def get_group(self, group_id: str) -> Group:
        return await self._request_model(Group, "GET", f"/groups/{group_id}")

    async def create_group(self, group: Group) -> Group:
        return await self._request_model(Group, "POST", "/groups", body=group)

    async def update_group(self, group_id: str, group: Group) -> Group:
        return await self._request_model(
            Group, "PUT", f"/groups/{group_id}", body=group
        )

    async def delete_group(self, group_id: str) -> Group:
        return await self._request_model(Group, "DELETE", f"/groups/{group_id}")

    async def list_group_admins(self, group_id: str) -> list[User]:
        admins = await self._request_model(
            GroupAdmins, "GET", f"/groups/{group_id}/admins"
        )
        return admins.admins

    async def list_group_members(self, group_id: str) -> list[User]:
        members = await self._request_model(
            GroupMembers, "GET", f"/groups/{group_id}/members"
        )
        return members.members

    async def get_group_activity(self, group_id: str) -> GroupChanges:
        return await self._request_model(
            GroupChanges, "GET", f"/groups/{group_id}/activity"
        )
