from django.contrib import admin
from django.urls import include, path

from meetgreet.handlers.health import HealthView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("health", HealthView.as_view(), name="health"),
    path("api/auth/", include("accounts.urls")),
    path("api/", include("events.urls")),
    path("api/", include("bookings.urls")),
]
