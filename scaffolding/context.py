"""AI assistant context document and project metadata.

Both are written under ``.kt-context/`` when a project is created. The
context document is meant to be pasted into an AI chat assistant.
"""

from schemas import ProjectMetadata

from .templates import CONTEXT_DIR, TemplateContext, substitute_variables


AI_CONTEXT_FILE = f"{CONTEXT_DIR}/ai-context.md"
METADATA_FILE = f"{CONTEXT_DIR}/project-dna.json"


AI_CONTEXT_TEMPLATE = """# Complete AI Assistant Context Package
# Project: {project_name}
# Generated: {generated_at}
# Knowledge Transfer Protocol Version: 1.0.0

---

## 🎯 PROJECT OVERVIEW

**Name:** {project_name}  
**Type:** Node.js Express Web Application  
**Purpose:** Knowledge Transfer Protocol validation and testing system  
**Technology Stack:** Node.js, Express.js, JSON file storage  
**AI Context:** Complete - Everything needed for development is in this file  

---

## 🧠 COMPLETE KNOWLEDGE TRANSFER PROTOCOLS

### 📁 1. CODE ORGANIZATION FRAMEWORK
*Universal Project Structure - Apply consistently across all projects*

#### Standard Directory Structure
```
{project_name}/
├── src/                    # Core application logic
│   └── server.js          # Main Express server entry point
├── tests/                  # Testing framework and test files
│   └── test-server.js     # Comprehensive test suite
├── docs/                   # Documentation and guides
│   ├── README.md          # Project documentation
│   └── API_DOCUMENTATION.md # API reference
├── public/                 # Static assets and frontend files
├── data/                   # Data files and storage
├── scripts/                # Build, deployment, and utility scripts
├── BestPractices/          # Knowledge Transfer Protocols
│   ├── Generic/           # Universal best practices
│   └── ProjectSpecific/   # Project-specific knowledge
├── .kt-context/           # AI assistant context and project memory
│   ├── ai-context.md      # This file - Complete AI context
│   └── project-dna.json   # Project metadata
├── package.json           # Dependencies and scripts
├── README.md              # Project overview
└── .gitignore            # Git ignore patterns
```

#### Core Organization Principles
1. **Separation of Concerns**: Each directory has a single, clear purpose
2. **Predictable Structure**: Anyone can navigate the project intuitively
3. **Scalable Organization**: Structure grows gracefully with project complexity
4. **Consistent Naming**: Use clear, descriptive directory and file names
5. **Documentation Co-location**: Keep docs close to relevant code

#### Implementation Guidelines
- Place all business logic in `src/`
- Keep all tests in `tests/` with parallel structure to `src/`
- Document everything in `docs/` with clear, practical examples
- Store static assets in `public/`
- Use `data/` for any data files, databases, or storage
- Put build/deployment scripts in `scripts/`
- Maintain Knowledge Transfer Protocols in `BestPractices/`

---

### 📝 2. GIT WORKFLOW PATTERNS
*Professional Version Control Standards for Quality and Collaboration*

#### Conventional Commit Message Format
```
<type>(<scope>): <description>

[optional body explaining the what and why]

[optional footer(s)]
```

#### Commit Types (ALWAYS use these)
- **feat**: New features or functionality
- **fix**: Bug fixes and error corrections
- **docs**: Documentation changes only
- **style**: Code formatting (no logic changes)
- **refactor**: Code restructuring (no functionality change)
- **test**: Adding or updating tests
- **chore**: Maintenance tasks, dependencies, tooling

#### Commit Examples
```
feat(auth): add user authentication system with JWT tokens
fix(api): resolve data validation error in user registration
docs(readme): update installation instructions for new Node version
style(server): format code according to ESLint rules
refactor(database): extract connection logic into separate module
test(auth): add comprehensive tests for login functionality
chore(deps): update Express to version 4.18.2
```

#### Branch Strategy
- **main**: Production-ready code only
- **feature/feature-name**: New feature development
- **fix/bug-description**: Bug fixes
- **docs/documentation-update**: Documentation improvements

#### Git Best Practices
1. **Commit Early and Often**: Small, focused commits are better
2. **Write Descriptive Messages**: Future developers (and AI) need context
3. **Review Before Committing**: Check changes with `git diff`
4. **One Concern Per Commit**: Don't mix features, fixes, and style changes
5. **Use Pull Requests**: Enable code review and discussion

---

### 📚 3. DOCUMENTATION FRAMEWORK
*Knowledge Capture and Transfer Standards for Seamless Understanding*

#### Documentation Types and Standards

##### Project Documentation
- **README.md**: Project overview, setup instructions, usage examples
- **API_DOCUMENTATION.md**: Complete API endpoint documentation with examples
- **CHANGELOG.md**: Version history and notable changes
- **CONTRIBUTING.md**: Guidelines for contributors

##### Code Documentation
- **Inline Comments**: Explain complex logic, not obvious code
- **JSDoc Comments**: Document all functions, classes, and modules
- **Architecture Decision Records (ADRs)**: Document important decisions

##### Process Documentation
- **Development Workflows**: Step-by-step development processes
- **Deployment Procedures**: How to deploy and release
- **Testing Strategies**: How to test features and bug fixes

#### Documentation Writing Guidelines
1. **Use Clear, Concise Language**: Write for humans and AI assistants
2. **Include Practical Examples**: Show, don't just tell
3. **Keep Current**: Update docs when code changes
4. **Structure Logically**: Use consistent headings and organization
5. **Test Examples**: Ensure all code examples actually work

#### Markdown Best Practices
- Use consistent heading hierarchy (# ## ### ####)
- Include code examples with proper syntax highlighting
- Add tables for structured information
- Use lists for step-by-step procedures
- Include links to related documentation

#### AI Assistant Integration Standards
Documentation must enable AI assistants to:
- Understand project context immediately upon reading
- Provide accurate guidance based on current state
- Maintain consistency across development sessions
- Support effective handoffs between different AI assistants
- Generate appropriate code following established patterns

---

### 🔄 4. PROTOCOL EVOLUTION FRAMEWORK
*Continuous Improvement and Knowledge Sharing System*

#### Evolution Principles
1. **Experience-Driven**: Protocols improve based on real-world usage
2. **Evidence-Based**: Changes supported by measurable outcomes
3. **Community-Informed**: Shared learnings across projects and teams
4. **AI-Optimized**: Enhanced for AI assistant understanding and application

#### Feedback Collection Methods
- Track development velocity and code quality metrics
- Measure time to understanding for new team members
- Monitor AI assistant effectiveness and consistency
- Document friction points and successful patterns
- Record knowledge transfer success rates

#### Protocol Update Process
1. **Identify Improvement Opportunities**: From experience and feedback
2. **Test Changes**: Validate improvements in real projects
3. **Document Results**: Measure impact and effectiveness
4. **Update Protocols**: Incorporate proven improvements
5. **Distribute Updates**: Share via CLI and documentation

#### Success Metrics
- **Developer Onboarding Time**: How quickly new team members become productive
- **AI Assistant Effectiveness**: Quality and consistency of AI-generated code
- **Code Review Efficiency**: Time spent on reviews and issues found
- **Project Handoff Success**: Seamless transitions between developers/teams
- **Knowledge Retention**: Information preserved across project lifecycle

---

## 🤖 AI ASSISTANT BEHAVIOR GUIDELINES

### Primary Directives (NEVER DEVIATE FROM THESE)
1. **Always Follow Knowledge Transfer Protocols**: Apply all four frameworks consistently
2. **Document Everything**: No code without corresponding documentation
3. **Use Conventional Commits**: All changes must follow git workflow patterns
4. **Maintain Project Structure**: Keep files in correct directories per organization framework
5. **Generate Comprehensive Context**: Update this file as project evolves

### Development Standards (APPLY TO ALL CODE)
- **Write Clean Code**: Self-documenting with clear variable and function names
- **Add JSDoc Comments**: Document all functions, classes, and complex logic
- **Include Error Handling**: Proper try/catch blocks and input validation
- **Create Tests**: Test new functionality before considering it complete
- **Update Documentation**: Keep README and API docs current with changes
- **Follow Established Patterns**: Maintain consistency with existing code style

### Knowledge Capture Requirements
- **Document Decisions**: Explain why choices were made in comments
- **Explain Complex Logic**: Add inline comments for non-obvious code
- **Create Usage Examples**: Show how to use new functions/features
- **Note Pattern Deviations**: Document any departures from standard practices
- **Record Successful Solutions**: Capture working approaches for reuse

### Quality Assurance Checklist
Before completing any development task:
- [ ] Code follows project structure (src/, tests/, docs/ organization)
- [ ] All functions have JSDoc documentation
- [ ] Tests written and passing for new functionality
- [ ] README.md updated with new features or changes
- [ ] Git commit follows conventional format
- [ ] Code style consistent with existing patterns
- [ ] Error handling implemented appropriately
- [ ] API documentation updated if endpoints changed

---

## 🎯 CURRENT PROJECT STATE

**Initialization Status**: Complete  
**Express Server**: Functional and ready for development  
**Testing Framework**: Configured with basic test structure  
**Documentation**: Base structure created, ready for updates  
**Knowledge Transfer Protocols**: All frameworks active and ready  
**AI Context**: This comprehensive file generated and current  

**Current Files:**
- `src/server.js`: Express server with basic routing
- `tests/test-server.js`: Test framework setup
- `package.json`: Dependencies and npm scripts configured
- `README.md`: Project overview and setup instructions
- `.kt-context/ai-context.md`: This complete context file
- `.kt-context/project-dna.json`: Project metadata

**Next Development Steps:**
1. Implement core application features following protocols
2. Add comprehensive API endpoints with documentation
3. Expand test coverage for all functionality
4. Update project documentation as features are added
5. Maintain this AI context file with project evolution

---

## 🔄 KNOWLEDGE EVOLUTION TRACKING

### Protocol Effectiveness Notes
*Update these as you work on the project:*

- **Code Organization**: [Track how well the structure works]
- **Git Workflow**: [Note any commit message or branching issues]
- **Documentation**: [Record what documentation approaches work best]
- **AI Understanding**: [Note any confusion or areas needing clarification]

### Lessons Learned
*Capture insights for future protocol improvements:*

- **Successful Patterns**: [What worked really well?]
- **Friction Points**: [What caused delays or confusion?]
- **Process Improvements**: [What would make development smoother?]
- **AI Collaboration**: [How can AI assistance be more effective?]

---

## 🎯 INSTRUCTIONS FOR AI ASSISTANTS

### Immediate Actions Upon Reading This File
1. **Acknowledge Understanding**: Confirm you've read and understood all protocols
2. **Apply Standards Immediately**: Use these frameworks for all subsequent work
3. **Maintain Consistency**: Keep all code and documentation aligned with these standards
4. **Ask for Clarification**: Request clarification if any protocol is unclear
5. **Update Context**: Modify this file as the project evolves

### Development Session Protocol
1. **Start Each Session**: Review current project state and recent changes
2. **Plan Changes**: Consider impact on structure, docs, and tests
3. **Implement Systematically**: Follow protocols for all code changes
4. **Document Thoroughly**: Update all relevant documentation
5. **Update Context**: Modify this file to reflect new project state

### Handoff Preparation
1. **Update This File**: Ensure all recent changes are documented
2. **Verify Documentation**: Check that all docs are current and accurate
3. **Run Tests**: Ensure all functionality is working correctly
4. **Commit Changes**: Use proper conventional commit messages
5. **Generate Summary**: Create brief summary of session accomplishments

---

**This file contains everything needed for immediate, effective AI-assisted development. No external references required.**
"""


def render_ai_context(context: TemplateContext) -> str:
    """Render the comprehensive AI context document."""
    return substitute_variables(AI_CONTEXT_TEMPLATE, context.variables())


def build_metadata(context: TemplateContext) -> ProjectMetadata:
    """Build the project metadata record."""
    return ProjectMetadata.for_project(context.project_name, context.generated_iso)


def render_context_files(context: TemplateContext) -> dict[str, str]:
    """Render both files written under the context directory.

    Returns:
        Dict of relative file path to file content
    """
    return {
        AI_CONTEXT_FILE: render_ai_context(context),
        METADATA_FILE: build_metadata(context).to_json(),
    }
