from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'sweets'

router = DefaultRouter(trailing_slash=False)
router.register(r'sweets', views.SweetViewSet, basename='sweet')

urlpatterns = [
    # Sweet ViewSet routes
    # GET    /api/sweets              - List all sweets
    # POST   /api/sweets              - Create sweet (admin)
    # GET    /api/sweets/{id}         - Get sweet details
    # PUT    /api/sweets/{id}         - Merge fields (admin)
    # PATCH  /api/sweets/{id}         - Merge fields (admin)
    # DELETE /api/sweets/{id}         - Deactivate sweet (admin)

    # Custom actions
    # GET    /api/sweets/search       - Filter by name, category, price range
    # GET    /api/sweets/categories   - List all categories

    # Purchase/restock live in apps.inventory

    # Include router URLs
    path('', include(router.urls)),
]
