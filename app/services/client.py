from app.core.exceptions import Unauthenticated
from app.core.security import get_password_hash, verify_password
from app.core.sessions import SessionRegistry
from app.database import new_id, utc_now
from app.models.client import Client
from app.schemas.client import OnboardingRequest, LoginRequest, LoginResponse
from app.storage import Storage


class ClientService:
    """
    Onboarding and login for client accounts.
    
    These are the only operations that run without a resolved client id.
    """
    
    def onboard(self, storage: Storage, data: OnboardingRequest) -> Client:
        """
        Create a client account with a hashed credential.
        
        Raises:
            ConstraintViolation: If the username is already taken
        """
        client = Client(
            id=new_id(),
            business_name=data.business_name,
            business_website=data.business_website,
            business_sector=data.business_sector,
            revenue=data.revenue,
            goals=data.goals,
            email=data.email,
            job_title=data.job_title,
            username=data.generated_username,
            password_hash=get_password_hash(data.generated_password),
            created_at=utc_now(),
        )
        return storage.create_client(client)
    
    def login(
        self,
        storage: Storage,
        sessions: SessionRegistry,
        credentials: LoginRequest
    ) -> LoginResponse:
        """
        Verify credentials and open a session.
        
        Unknown usernames and wrong passwords fail the same way.
        
        Raises:
            Unauthenticated: If the credentials don't match a client
        """
        client = storage.get_client_by_username(credentials.username)
        
        if not client or not verify_password(credentials.password, client.password_hash):
            raise Unauthenticated("Invalid credentials")
        
        token = sessions.create_session(client.id)
        return LoginResponse(session_id=token, client_name=client.business_name)


# Create a singleton instance
client_service = ClientService()
