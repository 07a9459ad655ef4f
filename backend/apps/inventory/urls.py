from django.urls import path

from .views import (
    CategoryDetailView,
    CategoryListView,
    ProductDetailView,
    ProductListView,
)

# Ids are captured as strings so malformed ids reach the view and get a 400.
urlpatterns = [
    path("categories", CategoryListView.as_view(), name="api-categories-list"),
    path(
        "categories/<str:category_id>",
        CategoryDetailView.as_view(),
        name="api-categories-detail",
    ),
    path("products", ProductListView.as_view(), name="api-products-list"),
    path(
        "products/<str:product_id>",
        ProductDetailView.as_view(),
        name="api-products-detail",
    ),
]
