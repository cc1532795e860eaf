from rest_framework import permissions


def company_membership_for(user):
    """Return the CompanyMember row of an authenticated staff user, or None."""
    if not (user and getattr(user, "is_authenticated", False)):
        return None
    return user.company_membership()


class IsCompanyMember(permissions.BasePermission):
    """Allow access only to users acting on behalf of a company."""
    message = "Only company team members can use the company dashboard."

    def has_permission(self, request, view):
        return company_membership_for(request.user) is not None
