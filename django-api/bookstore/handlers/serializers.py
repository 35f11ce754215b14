"""Serializers for request validation and for rendering domain models.

Input serializers turn request bodies into the plain values the service
expects. Output serializers read attributes straight off domain models.
"""

from rest_framework import serializers

from bookstore.domain import Date


class DateSerializer(serializers.Serializer):
    """Day/month/year stamp. No calendar validation, matching the domain.

    Accepts either an object or the "dd mm yyyy" string form.
    """

    day = serializers.IntegerField()
    month = serializers.IntegerField()
    year = serializers.IntegerField()

    def to_internal_value(self, data) -> Date:
        if isinstance(data, str):
            try:
                return Date.from_string(data)
            except ValueError:
                raise serializers.ValidationError('Date must be "dd mm yyyy".')
        values = super().to_internal_value(data)
        return Date(**values)


class BookInputSerializer(serializers.Serializer):
    """Validates a request to add a book."""

    title = serializers.CharField(max_length=255)
    author = serializers.CharField(max_length=255)
    genre = serializers.CharField(max_length=100)
    isbn = serializers.CharField(max_length=32)
    publication_date = DateSerializer()
    price = serializers.IntegerField(min_value=0)
    quantity = serializers.IntegerField(min_value=0)


class BookSerializer(serializers.Serializer):
    """Serializer for Book domain model."""

    title = serializers.CharField()
    author = serializers.CharField()
    genre = serializers.CharField()
    isbn = serializers.CharField()
    publication_date = DateSerializer()
    publication_date_display = serializers.CharField(source="publication_date")
    price = serializers.IntegerField(source="price.amount")
    quantity = serializers.IntegerField()


class TransactionInputSerializer(serializers.Serializer):
    """Validates a request to record an order or a sale."""

    transaction_id = serializers.CharField(max_length=64)
    transaction_date = DateSerializer()
    customer_id = serializers.CharField(max_length=64)
    isbn = serializers.CharField(max_length=32)
    quantity = serializers.IntegerField(min_value=1)


class TransactionSerializer(serializers.Serializer):
    """Serializer for a processed Transaction."""

    transaction_id = serializers.CharField()
    transaction_date = DateSerializer()
    kind = serializers.CharField(source="kind.value")
    customer_id = serializers.CharField()
    isbn = serializers.CharField()
    quantity = serializers.IntegerField()
    outcome = serializers.CharField(source="outcome.value")


class TransactionSummarySerializer(serializers.Serializer):
    """Id and date only, the same for orders and sales."""

    transaction_id = serializers.CharField(source="id")
    transaction_date = DateSerializer(source="date")
