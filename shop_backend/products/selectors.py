# products/selectors.py

from products.models import ProductBatch


def list_product_batches(product_id):
    """
    Batches of one product that still hold stock, earliest expiry first.
    Batches without an expiry date sort last.
    """
    return (
        ProductBatch.objects.select_related("product")
        .filter(product_id=product_id, quantity__gt=0)
        .order_by("expiry_date", "batch_number")
    )
