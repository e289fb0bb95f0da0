from rest_framework import status, serializers as drf_serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from .domain import RatingDetails
from .models import ReviewSort
from .serializers import ReviewCreateSerializer, ReviewSerializer
from . import services


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()
    code = drf_serializers.CharField()
    fields = drf_serializers.DictField(
        child=drf_serializers.ListField(child=drf_serializers.CharField()),
        required=False,
        help_text="Per-field messages, present when the request body failed validation",
    )


def _viewer_id(request):
    if request.user and request.user.is_authenticated:
        return str(request.user.id)
    return None


@extend_schema(
    methods=['GET'],
    parameters=[
        OpenApiParameter(
            'sort',
            OpenApiTypes.STR,
            enum=[choice.value for choice in ReviewSort],
            description="'liked' orders by like count, anything else by newest first",
        ),
    ],
    responses={200: ReviewSerializer(many=True), 404: ErrorResponseSerializer},
    description="List a store's reviews with like counts.",
    tags=['reviews'],
)
@extend_schema(
    methods=['POST'],
    request=ReviewCreateSerializer,
    responses={
        201: ReviewSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Create a review of a store, optionally linking its menus and files.",
    tags=['reviews'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticatedOrReadOnly])
def store_reviews(request, store_id):
    """List or create reviews of one store."""
    if request.method == 'GET':
        reviews = services.list_reviews(
            store_id,
            sort=request.query_params.get('sort'),
            viewer_id=_viewer_id(request),
        )
        return Response(ReviewSerializer(reviews, many=True).data)

    serializer = ReviewCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    details = data.get('rating_details')
    review = services.create_review(
        store_id=store_id,
        user_id=str(request.user.id),
        rating=data['rating'],
        content=data.get('content'),
        rating_details=RatingDetails(**details) if details else None,
        menu_ids=data['menu_ids'],
        file_ids=data['file_ids'],
    )
    return Response(ReviewSerializer(review).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: ReviewSerializer, 404: ErrorResponseSerializer},
    description="Get a single review.",
    tags=['reviews'],
)
@api_view(['GET'])
def review_detail(request, review_id):
    review = services.get_review_by_id(review_id, viewer_id=_viewer_id(request))
    return Response(ReviewSerializer(review).data)


@extend_schema(
    methods=['POST', 'DELETE'],
    request=None,
    responses={204: None, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
    description="Like (POST) or unlike (DELETE) a review. Both are idempotent.",
    tags=['reviews'],
)
@api_view(['POST', 'DELETE'])
@permission_classes([IsAuthenticated])
def review_likes(request, review_id):
    if request.method == 'POST':
        services.like_review(review_id, str(request.user.id))
    else:
        services.unlike_review(review_id, str(request.user.id))
    return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    responses={200: ReviewSerializer(many=True), 404: ErrorResponseSerializer},
    description="List reviews written by a user, newest first.",
    tags=['reviews'],
)
@api_view(['GET'])
def user_reviews(request, user_id):
    reviews = services.get_user_reviews(user_id, viewer_id=_viewer_id(request))
    return Response(ReviewSerializer(reviews, many=True).data)
