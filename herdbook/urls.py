"""Root URL configuration for the Herdbook project."""

from django.contrib import admin
from django.urls import include, path
from django.views.generic import RedirectView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', RedirectView.as_view(pattern_name='bull_list', permanent=False)),
    path('', include('bulls.urls')),
]
