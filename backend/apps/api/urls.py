from django.urls import include, path

urlpatterns = [
    path("", include("apps.inventory.urls")),
]
