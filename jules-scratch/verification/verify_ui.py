from playwright.sync_api import sync_playwright, Page, expect

def run_verification(page: Page):
    """
    Registers a user, writes a tagged thought from the home widget, then
    edits and deletes it from the history page, taking screenshots on the way.
    Expects `flask seed-competencies` and `flask run` on port 5000.
    """
    base_url = "http://127.0.0.1:5000"
    page.on("dialog", lambda dialog: dialog.accept("Edited from the history page"))

    # 1. Register a new user
    page.goto(f"{base_url}/auth/register")
    expect(page).to_have_title("Register - Daily Journal")
    page.get_by_placeholder("Email address").fill("testuser@example.com")
    page.get_by_placeholder("Password (min. 8 characters)").fill("password123")
    page.get_by_role("button", name="Create account").click()
    expect(page).to_have_title("Login - Daily Journal")

    # 2. Log in
    page.get_by_placeholder("Email address").fill("testuser@example.com")
    page.get_by_placeholder("Password").fill("password123")
    page.get_by_role("button", name="Sign in").click()
    expect(page).to_have_title("Today - Daily Journal")

    # 3. Write a thought tagged with the first competency
    page.get_by_placeholder("Type your thoughts for the day...").fill("Presented my project today")
    page.get_by_role("checkbox").first.check()
    page.get_by_role("button", name="Save Thought").click()
    expect(page.get_by_text("Presented my project today")).to_be_visible()
    # Load it back into the composer and update it
    page.get_by_role("button", name="Edit").first.click()
    page.get_by_placeholder("Type your thoughts for the day...").fill("Presented my project to the team")
    page.get_by_role("button", name="Update").click()
    expect(page.get_by_text("Presented my project to the team")).to_be_visible()
    page.screenshot(path="jules-scratch/verification/home.png")

    # 4. Edit and delete it from the history page
    page.get_by_role("link", name="Manage").first.click()
    expect(page).to_have_title("All thoughts - Daily Journal")
    page.get_by_role("button", name="Edit").first.click()
    expect(page.get_by_text("Edited from the history page")).to_be_visible()
    page.screenshot(path="jules-scratch/verification/history.png")
    page.get_by_role("button", name="Delete").first.click()
    expect(page.get_by_text("Edited from the history page")).to_have_count(0)

def main():
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True)
        page = browser.new_page()
        run_verification(page)
        browser.close()

if __name__ == "__main__":
    main()
