"""Query-string pagination shared by list handlers."""

from django.conf import settings
from rest_framework import serializers

from meetgreet.domain import Page, PageRequest


class PageQuerySerializer(serializers.Serializer):
    """Parses ``?page=&limit=``. Subclasses add list filters."""

    page = serializers.IntegerField(min_value=1, default=1)
    limit = serializers.IntegerField(min_value=1, required=False)

    def validate_limit(self, value: int) -> int:
        if value > settings.MAX_PAGE_SIZE:
            raise serializers.ValidationError(f"Ensure this value is less than or equal to {settings.MAX_PAGE_SIZE}.")
        return value

    def page_request(self) -> PageRequest:
        data = self.validated_data
        return PageRequest(page=data["page"], limit=data.get("limit") or settings.PAGE_SIZE)


def paginated_body(page: Page, key: str, items: list) -> dict:
    return {
        "success": True,
        "count": page.total,
        "totalPages": page.total_pages,
        "currentPage": page.request.page,
        key: items,
    }
