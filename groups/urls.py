from django.urls import path
from .views import GroupListCreateView, GroupDetailView, GroupMemberView

urlpatterns = [
    path("", GroupListCreateView.as_view(), name="group-list"),
    path("<int:pk>/", GroupDetailView.as_view(), name="group-detail"),
    path("<int:pk>/members/", GroupMemberView.as_view(), name="group-add-member"),
]
