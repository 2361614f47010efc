# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.warning": "Warning",
    "dialog.confirm": "Confirm",

    # Buttons
    "button.next": "Next",
    "button.previous": "Previous",
    "button.submit": "Submit",
    "button.submit_registration": "Submit Registration",
    "button.submitting": "Submitting...",
    "button.sign_in": "Sign In",
    "button.signing_in": "Signing in...",
    "button.sign_out": "Sign Out",
    "button.go_to_sign_in": "Go to Sign In",
    "button.register": "Register",
    "button.dashboard": "My Dashboard",
    "button.browse": "Browse...",
    "button.upload": "Upload Material",
    "button.uploading": "Uploading...",
    "button.delete": "Delete",
    "button.refresh": "Refresh",
    "button.download": "Download",
    "button.check_in": "Mark Attendance",
    "button.checking_in": "Submitting...",
    "button.approve": "Approve",
    "button.approving": "Processing...",
    "common.yes": "Yes",
    "common.no": "No",

    # Wizard
    "wizard.title": "Join AT-ICT",
    "wizard.progress": "Step {current} of {total}",
    "wizard.step.personal": "Personal Info",
    "wizard.step.academic": "Academic Journey",
    "wizard.step.contact": "Contact Info",
    "wizard.step.tech": "Tech Knowledge",
    "wizard.step.personal.description": "Tell us who you are and secure your account.",
    "wizard.step.academic.description": "Where are you in your IGCSE journey?",
    "wizard.step.contact.description": "How can we reach you and your parents?",
    "wizard.step.tech.description": "Rate your current tech knowledge from 1 to 10.",

    # Field labels
    "field.first_name": "First Name",
    "field.last_name": "Last Name",
    "field.email": "Email Address",
    "field.password": "Password",
    "field.confirm_password": "Confirm Password",
    "field.year": "Year",
    "field.year_option": "Year {year}",
    "field.session": "Exam Session",
    "field.nationality": "Nationality",
    "field.nationality_placeholder": "Select your nationality",
    "field.school": "School",
    "field.is_retaker": "I am retaking the IGCSE ICT exam",
    "field.other_subjects": "Other Subjects",
    "field.contact_number": "Contact Number",
    "field.parent_contact_number": "Parent Contact Number",
    "field.alternative_number": "Alternative Number",
    "field.city": "City",
    "field.country": "Country",
    "field.tech_knowledge": "Tech Knowledge",
    "field.title": "Title",
    "field.material_type": "Type",
    "field.material_file": "File",
    "field.thumbnail": "Thumbnail",
    "field.attendance_token": "Or paste token here",

    # Summary
    "summary.title": "Registration Summary",
    "summary.name": "Name:",
    "summary.email": "Email:",
    "summary.year_session": "Year & Session:",
    "summary.school": "School:",
    "summary.tech_knowledge": "Tech Knowledge:",
    "summary.year_session_value": "Year {year} - {session}",
    "summary.tech_knowledge_value": "{value}/10",

    # Local validation
    "validation.first_name_required": "First name is required",
    "validation.last_name_required": "Last name is required",
    "validation.email_required": "Email is required",
    "validation.email_invalid": "Email is invalid",
    "validation.email_enter_valid": "Please enter a valid email",
    "validation.password_required": "Password is required",
    "validation.password_too_short": "Password must be at least {min_length} characters",
    "validation.passwords_mismatch": "Passwords do not match",
    "validation.year_required": "Year is required",
    "validation.session_required": "Session is required",
    "validation.nationality_required": "Nationality is required",
    "validation.school_required": "School is required",
    "validation.contact_number_required": "Contact number is required",
    "validation.parent_contact_required": "Parent contact is required",
    "validation.city_required": "City is required",
    "validation.country_required": "Country is required",

    # Server-reported registration errors
    "error.registration.validation_header": "Validation Error:",
    "error.registration.validation_item": "Validation error occurred",
    "error.registration.invalid_param": "Invalid {param}",
    "error.registration.database_header": "Database Validation Errors:",
    "error.registration.database_item": "Database validation error",
    "error.registration.database_fallback": "• Please check your information and try again.",
    "error.registration.duplicate": (
        "📧 This email address is already registered!\n\n"
        "✅ Good news: Your account exists in our system.\n\n"
        "🔑 Please try:\n"
        "• Sign in with your existing credentials\n"
        "• Use a different email address if you want a new account\n"
        "• Contact support if you've forgotten your password"
    ),
    "error.registration.failed": "Registration failed. Please check your information and try again.",
    "error.registration.network": (
        "🔌 Unable to connect to the server. Please make sure:\n"
        "• Your internet connection is stable\n"
        "• The backend server is running and reachable\n"
        "• Try submitting again in a moment\n\n"
        "If the problem persists, please contact support."
    ),
    "error.registration.unexpected": (
        "An unexpected error occurred. Please try again or contact support "
        "if the issue continues."
    ),

    # Sign-in
    "login.title": "Welcome Back",
    "login.subtitle": "Sign in to access your AT-ICT dashboard",
    "login.no_account": "Don't have an account?",
    "error.login.locked": (
        "Account is temporarily locked due to too many failed attempts. "
        "Please try again later."
    ),
    "error.login.failed": "Login failed. Please check your credentials.",

    # Materials
    "materials.title": "Materials Center",
    "materials.student_title": "Study Materials",
    "materials.empty": "No materials yet.",
    "materials.type.theory": "Theory",
    "materials.type.practical": "Practical",
    "materials.type.other": "Other",
    "materials.upload_wait": "Please wait while your file is being uploaded...",
    "materials.confirm_delete": "Are you sure you want to delete this material?",
    "error.materials.file_too_large": "File size must be less than 100MB",
    "error.materials.file_type": "File type {extension} is not supported",
    "error.materials.file_missing": "Selected file could not be found",
    "error.materials.thumbnail_too_large": "Thumbnail size must be less than 2MB",
    "error.materials.thumbnail_not_image": "Thumbnail must be an image file",
    "error.materials.no_file": "Please select a file to upload",
    "error.materials.no_token": "Authentication token is missing or invalid. Please log in again.",
    "error.materials.upload_status": "Upload failed with status {status}",
    "error.materials.network": "Network error during upload. Please check your connection and try again.",
    "error.materials.timeout": "Upload timed out. Please try again with a smaller file or check your connection.",
    "error.materials.fetch_failed": "Failed to fetch materials",
    "error.materials.delete_failed": "Error deleting material",
    "error.materials.download_failed": "Error downloading material",
    "error.materials.bad_response": "Error processing response",
    "success.materials.updated": "Material updated successfully!",
    "success.materials.deleted": "Material deleted successfully!",

    # Attendance
    "attendance.title": "Attendance",
    "attendance.instructions": (
        "Scan the session QR code provided by your teacher, or paste the "
        "token below to mark your attendance."
    ),
    "success.attendance.marked": "Attendance marked successfully",
    "error.attendance.failed": "Failed to check in",
    "error.attendance.network": "Network error while submitting token",

    # Pending registrations
    "registration.pending.title": "Pending Registrations",
    "registration.pending.subtitle": "Review and approve new student registrations",
    "registration.pending.count": "{count} Pending",
    "registration.pending.empty": "No pending registrations. All registrations have been processed.",
    "registration.pending.item": "{name}  ·  Year {year}  ·  {city}, {nationality}  ·  {school}  ·  {session}",
    "registration.pending.details": (
        "{name}\nEmail: {email}\nContact: {contact}\nSchool: {school}\n"
        "Tech level: {tech}/10\nRetaker: {retaker}"
    ),
    "registration.pending.approval_note": "Registration approved by teacher",
    "success.registration.approved": "Registration approved successfully!",
    "error.registration.approve_failed": "Failed to approve registration",
    "error.registration.approve_network": "Network Error: Failed to connect to server",
    "error.registration.pending_failed": "Failed to fetch pending registrations",

    # Portal
    "portal.home_title": "AT-ICT IGCSE ICT Tutoring",
    "portal.home_subtitle": "Master IGCSE ICT with structured lessons, practicals and progress tracking.",
    "portal.welcome": "Welcome, {name}",
    "portal.role.teacher": "Teacher Dashboard",
    "portal.role.student": "Student Dashboard",
    "portal.role.parent": "Parent Dashboard",
    "portal.tab.materials": "Materials",
    "portal.parent_summary": "Your child's progress, attendance and reports are available from the web portal.",

    # Toasts
    "toast.login_success": "Login successful! Redirecting...",
    "toast.login_error": "❌ Login failed: {message}",
    "toast.logout_success": "👋 Logged out successfully",
    "toast.registration_success": "Registration submitted! Check your WhatsApp for approval.",
    "toast.registration_error": "❌ Registration failed: {message}",
    "toast.upload_success": "📁 {filename} uploaded successfully!",
    "toast.upload_error": "❌ Upload failed: {message}",
    "toast.network_error": "🌐 Network error. Please check your connection and try again.",
    "toast.server_error": "🔧 Server error. Please try again later.",
    "toast.validation_error": "⚠️ {message}",

    # Generic
    "error.api.connection": "Unable to reach the server. Please check your connection.",
    "error.api.timeout": "The server took too long to respond. Please try again.",
    "error.unexpected": "An unexpected error occurred.",
}
