from django.contrib import admin
from django.urls import path, include

from core.views import HealthView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/health/', HealthView.as_view()),
    path('api/auth/', include('authapi.urls')),
    path('api/users/', include('users.urls')),
    path('api/notes/', include('notes.urls')),
    path('api/notebooks/', include('notebooks.urls')),
    path('api/tags/', include('tags.urls')),
    path('api/comments/', include('comments.urls')),
    path('api/groups/', include('groups.urls')),
    path('api/attachments/', include('attachments.urls')),
]
