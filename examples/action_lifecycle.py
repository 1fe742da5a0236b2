"""Example: Action Lifecycle

Shows how to create, bind, deploy and remove an action with ManagementClient.
"""

from auth0_mgmt import ManagementClient
from auth0_mgmt.models import Action, BindingUpdate, Trigger

CODE = """
exports.onExecutePostLogin = async (event, api) => {
  api.idToken.setCustomClaim("https://example.com/roles", event.authorization?.roles);
};
"""


def main():
    # Reads AUTH0_DOMAIN and AUTH0_API_TOKEN from the environment
    client = ManagementClient()

    # Requests are built first and only sent on execute()
    request = client.actions.create(
        Action(
            name="add-role-claims",
            code=CODE,
            runtime="node18",
            supported_triggers=[Trigger(id="post-login", version="v3")],
        )
    )
    print(f"{request.method} {request.url}")
    action = request.execute()
    print(f"Created action: {action.id}")

    version = client.actions.deploy(action.id).execute()
    print(f"Deployed version {version.number} ({version.status})")

    bindings = client.actions.update_trigger_bindings(
        "post-login", [BindingUpdate.for_action_name(action.name)]
    ).execute()
    print(f"post-login now runs {len(bindings.bindings)} action(s)")

    # Unbind and remove
    client.actions.update_trigger_bindings("post-login", []).execute()
    client.actions.delete(action.id, force=True).execute()
    print("Deleted")

    client.close()


if __name__ == "__main__":
    main()
