"""URL declarations for the bull registry.

HTML pages live under ``bulls/`` and the JSON endpoints under
``api/bulls/``.
"""

from django.urls import path

from . import views
from . import views_api as api

urlpatterns = [
    path('bulls/', views.bull_list, name='bull_list'),
    path('bulls/add/', views.bull_add, name='bull_add'),
    path('bulls/import/', views.bull_import, name='bull_import'),
    path('bulls/<int:pk>/', views.bull_detail, name='bull_detail'),
    path('bulls/<int:pk>/edit/', views.bull_edit, name='bull_edit'),
    path('bulls/<int:pk>/delete/', views.bull_delete, name='bull_delete'),

    # JSON API
    path('api/bulls/', api.api_bull_list, name='api_bull_list'),
    path('api/bulls/<int:pk>/', api.api_bull_detail, name='api_bull_detail'),
]
