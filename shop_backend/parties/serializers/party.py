# parties/serializers/party.py

from rest_framework import serializers

from parties.models import Customer, Supplier


class CustomerLedgerRowSerializer(serializers.ModelSerializer):
    """
    Customer list row, read from customers_with_ledger() annotations.
    """

    total_invoices = serializers.IntegerField(read_only=True)
    total_purchase = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    total_cash = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    total_credit = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    total_paid = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    total_returns = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    balance = serializers.DecimalField(
        source="ledger_balance", max_digits=12, decimal_places=2, read_only=True
    )

    class Meta:
        model = Customer
        fields = [
            "id",
            "name",
            "phone",
            "total_invoices",
            "total_purchase",
            "total_cash",
            "total_credit",
            "total_paid",
            "total_returns",
            "balance",
        ]
        read_only_fields = fields


class SupplierLedgerRowSerializer(serializers.ModelSerializer):
    total_invoices = serializers.IntegerField(read_only=True)
    total_imports = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    total_paid = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    total_returns = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    balance = serializers.DecimalField(
        source="ledger_balance", max_digits=12, decimal_places=2, read_only=True
    )

    class Meta:
        model = Supplier
        fields = [
            "id",
            "name",
            "phone",
            "currency",
            "total_invoices",
            "total_imports",
            "total_paid",
            "total_returns",
            "balance",
        ]
        read_only_fields = fields
