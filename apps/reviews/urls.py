from django.urls import path
from . import views

app_name = 'reviews'

urlpatterns = [
    # GET  /api/stores/{id}/reviews/?sort=new|liked - List store reviews
    # POST /api/stores/{id}/reviews/                - Create review
    path('stores/<str:store_id>/reviews/', views.store_reviews, name='store-reviews'),

    path('reviews/<str:review_id>/', views.review_detail, name='review-detail'),

    # POST   /api/reviews/{id}/likes/ - Like
    # DELETE /api/reviews/{id}/likes/ - Unlike
    path('reviews/<str:review_id>/likes/', views.review_likes, name='review-likes'),

    path('users/<str:user_id>/reviews/', views.user_reviews, name='user-reviews'),
]
