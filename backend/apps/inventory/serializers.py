from decimal import Decimal

from rest_framework import serializers


class CategorySerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(max_length=255)

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("This field may not be blank.")
        return value


class ProductWriteSerializer(serializers.Serializer):
    # Full product payload; used for both create and replace-style PATCH.
    # 'id' is server-assigned and never read from the body.
    name = serializers.CharField(max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0")
    )
    stock = serializers.IntegerField(min_value=0, required=False, default=0)
    categoryId = serializers.IntegerField(source="category_id")


class ProductSerializer(serializers.Serializer):
    # Matches ProductDTO, the shape returned from writes.
    id = serializers.IntegerField()
    name = serializers.CharField()
    description = serializers.CharField()
    price = serializers.DecimalField(max_digits=10, decimal_places=2)
    stock = serializers.IntegerField()
    categoryId = serializers.IntegerField(source="category_id")


class ProductWithCategorySerializer(ProductSerializer):
    category = CategorySerializer()
