from rest_framework import viewsets, status, serializers as drf_serializers
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from apps.accounts.permissions import IsAdminRole
from .models import Sweet
from .serializers import (
    SweetSerializer,
    SweetCreateSerializer,
    SweetUpdateSerializer,
    SweetSearchSerializer,
)
from .services import (
    create_sweet,
    update_sweet,
    delete_sweet,
    get_sweet_by_id,
    list_sweets,
    search_sweets,
    get_all_categories,
    SweetNotFoundError,
)


class SweetViewSet(viewsets.ModelViewSet):
    """
    ViewSet for Sweet catalog operations.

    list: Get all sweets ordered by name
    create: Create a new sweet (admin)
    retrieve: Get a specific sweet
    update / partial_update: Merge the supplied fields (admin)
    destroy: Deactivate a sweet (admin)
    """

    queryset = Sweet.objects.filter(is_active=True)
    serializer_class = SweetSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = None
    lookup_value_regex = r'\d+'

    def get_permissions(self):
        """Catalog mutations are admin-only."""
        if self.action in ['create', 'update', 'partial_update', 'destroy']:
            return [IsAuthenticated(), IsAdminRole()]
        return super().get_permissions()

    def get_queryset(self):
        return list_sweets()

    def get_serializer_class(self):
        """Use different serializers for different actions."""
        if self.action == 'create':
            return SweetCreateSerializer
        elif self.action in ['update', 'partial_update']:
            return SweetUpdateSerializer
        return SweetSerializer

    def retrieve(self, request, *args, **kwargs):
        """Get a single sweet."""
        try:
            sweet = get_sweet_by_id(sweet_id=kwargs.get('pk'))
        except SweetNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(SweetSerializer(sweet).data)

    def create(self, request, *args, **kwargs):
        """Create a new sweet."""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        sweet = create_sweet(**serializer.validated_data)

        return Response(
            SweetSerializer(sweet).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, *args, **kwargs):
        """PUT and PATCH both merge the supplied fields."""
        serializer = SweetUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            sweet = update_sweet(
                sweet_id=kwargs.get('pk'),
                data=serializer.validated_data
            )
        except SweetNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(SweetSerializer(sweet).data)

    def destroy(self, request, *args, **kwargs):
        """Soft delete a sweet."""
        try:
            delete_sweet(sweet_id=kwargs.get('pk'))
        except SweetNotFoundError as e:
            return Response(
                {'error': str(e)},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(status=status.HTTP_204_NO_CONTENT)

    @extend_schema(
        parameters=[SweetSearchSerializer],
        responses={200: SweetSerializer(many=True)},
        description="Search sweets by name, category and price range.",
    )
    @action(detail=False, methods=['get'])
    def search(self, request):
        """Search sweets with optional filters."""
        filter_serializer = SweetSearchSerializer(data=request.query_params)
        filter_serializer.is_valid(raise_exception=True)

        sweets = search_sweets(**filter_serializer.validated_data)
        return Response(SweetSerializer(sweets, many=True).data)

    @extend_schema(
        responses={200: drf_serializers.ListSerializer(child=drf_serializers.CharField())},
        description="Get list of all categories.",
    )
    @action(detail=False, methods=['get'])
    def categories(self, request):
        """Get list of all categories."""
        return Response(get_all_categories())
