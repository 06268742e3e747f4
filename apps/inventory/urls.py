from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

app_name = 'inventory'

# The sweets router serves the API root at /api/
router = SimpleRouter(trailing_slash=False)
router.register(r'transactions', views.StockTransactionViewSet, basename='transaction')

urlpatterns = [
    # Stock movements
    # POST   /api/sweets/{id}/purchase  - Purchase (authenticated)
    # POST   /api/sweets/{id}/restock   - Restock (admin)
    path('sweets/<int:sweet_id>/purchase', views.purchase_sweet, name='sweet-purchase'),
    path('sweets/<int:sweet_id>/restock', views.restock_sweet, name='sweet-restock'),

    # Ledger (admin, read-only)
    # GET    /api/transactions          - List transactions
    # GET    /api/transactions/{id}     - Get transaction
    path('', include(router.urls)),
]
