from rest_framework import status, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .permissions import IsAdminManager
from .serializers import (
    ManagerSerializer,
    ManagerRegistrationSerializer,
    LoginSerializer,
    TokenResponseSerializer,
)
from .services import (
    issue_token,
    register_manager,
    get_manager_profile,
    MissingCredentialsError,
    ManagerNotFoundError,
    InvalidCredentialsError,
    InactiveAccountError,
    ManagerRegistrationError,
)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    request=LoginSerializer,
    responses={
        200: TokenResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Authenticate a manager with email and password and receive a bearer token.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        tokens = issue_token(
            email=serializer.validated_data['email'],
            password=serializer.validated_data['password'],
        )
    except MissingCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except ManagerNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response(tokens)


@extend_schema(
    request=ManagerRegistrationSerializer,
    responses={
        201: ManagerSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a new manager account (admin managers only).",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdminManager])
def register(request):
    """Register a new manager."""
    serializer = ManagerRegistrationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        manager = register_manager(**serializer.validated_data)
    except ManagerRegistrationError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(ManagerSerializer(manager).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: ManagerSerializer, 404: ErrorResponseSerializer},
    description="Get the authenticated manager's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def me(request):
    """Get current manager profile."""
    try:
        manager = get_manager_profile(manager_id=request.user.id)
    except ManagerNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(ManagerSerializer(manager).data)
