from rest_framework import viewsets, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from apps.accounts.permissions import IsAdminRole
from apps.sweets.serializers import SweetSerializer
from apps.sweets.services import SweetNotFoundError
from .exceptions import InventoryServiceError
from .serializers import (
    PurchaseInputSerializer,
    RestockInputSerializer,
    StockTransactionSerializer,
    StockTransactionListSerializer,
)
from .services import InventoryService


class StockTransactionViewSet(viewsets.ReadOnlyModelViewSet):
    """
    ViewSet for the transaction ledger (admin, read-only).

    list: Get all transactions, newest first
    retrieve: Get a specific transaction
    """

    serializer_class = StockTransactionListSerializer
    permission_classes = [IsAuthenticated, IsAdminRole]
    pagination_class = None
    lookup_value_regex = r'\d+'

    def get_queryset(self):
        return InventoryService.list_transactions()


@extend_schema(
    request=PurchaseInputSerializer,
    responses={201: StockTransactionSerializer},
    description="Purchase a sweet. Decrements stock and records a purchase transaction.",
    tags=['inventory'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def purchase_sweet(request, sweet_id):
    """Purchase a sweet - thin HTTP handler."""
    input_serializer = PurchaseInputSerializer(data=request.data)
    input_serializer.is_valid(raise_exception=True)

    try:
        entry = InventoryService.purchase(
            user_id=request.user.id,
            sweet_id=sweet_id,
            quantity=input_serializer.validated_data['quantity']
        )
    except SweetNotFoundError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_404_NOT_FOUND
        )
    except InventoryServiceError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    return Response(
        StockTransactionSerializer(entry).data,
        status=status.HTTP_201_CREATED
    )


@extend_schema(
    request=RestockInputSerializer,
    responses={200: SweetSerializer},
    description="Restock a sweet (admin). Increments stock and records a restock transaction.",
    tags=['inventory'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminRole])
def restock_sweet(request, sweet_id):
    """Restock a sweet - thin HTTP handler."""
    input_serializer = RestockInputSerializer(data=request.data)
    input_serializer.is_valid(raise_exception=True)

    try:
        sweet = InventoryService.restock(
            user_id=request.user.id,
            sweet_id=sweet_id,
            quantity=input_serializer.validated_data['quantity']
        )
    except SweetNotFoundError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_404_NOT_FOUND
        )
    except InventoryServiceError as e:
        return Response(
            {'error': str(e)},
            status=status.HTTP_400_BAD_REQUEST
        )

    return Response(SweetSerializer(sweet).data)
