from rest_framework import permissions

from cookbook.services.ownership import actor_id_of, can_mutate


class IsOwnerOrReadOnly(permissions.BasePermission):
    """Object-level permission: reads for anyone, writes only for the owner."""

    owner_field = "owner_id"

    def has_object_permission(self, request, view, obj):
        if request.method in permissions.SAFE_METHODS:
            return True
        owner_id = getattr(obj, self.owner_field, None)
        if owner_id is None:
            owner_id = getattr(obj, "user_id", None)
        return can_mutate(actor_id_of(request.user), owner_id)
