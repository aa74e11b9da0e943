"""
Статический каталог поддерживаемых LLM-моделей.

Модели сгруппированы по провайдерам и отсортированы по возможностям/новизне.
Правило: не более одной модели с default=True на провайдера
(проверяется validate_catalog при сборке ModelRegistry).
"""

from neobase_ai.ai_engine.constants import Provider
from neobase_ai.models.llm_models import LLMModel

SUPPORTED_LLM_MODELS: tuple[LLMModel, ...] = (
    # OPENAI MODELS (Latest as of December 2025)
    # Chat Completion Models Only
    # GPT-5 Series (Frontier Models - Chat Completions)
    LLMModel(
        id="gpt-5.2",
        provider=Provider.OPENAI,
        display_name="GPT-5.2 (Best for Coding & Agentic)",
        is_enabled=True,
        max_completion_tokens=100000,
        temperature=1.0,
        input_token_limit=200000,
        description="Most advanced frontier model, best for coding tasks and agentic applications across all industries",
    ),
    LLMModel(
        id="gpt-5",
        provider=Provider.OPENAI,
        display_name="GPT-5 (Full Reasoning)",
        is_enabled=True,
        max_completion_tokens=100000,
        temperature=1.0,
        input_token_limit=200000,
        description="Full reasoning model with configurable reasoning effort for complex problem-solving tasks",
    ),
    LLMModel(
        id="gpt-5-mini",
        provider=Provider.OPENAI,
        display_name="GPT-5 Mini (Fast & Cost-Efficient)",
        is_enabled=True,
        max_completion_tokens=50000,
        temperature=1.0,
        input_token_limit=128000,
        description="Faster, cost-efficient version of GPT-5 for well-defined tasks with good performance",
    ),
    LLMModel(
        id="gpt-5-nano",
        provider=Provider.OPENAI,
        display_name="GPT-5 Nano (Fastest)",
        is_enabled=True,
        max_completion_tokens=30000,
        temperature=1.0,
        input_token_limit=100000,
        description="Fastest and most cost-efficient version of GPT-5 for rapid inference",
    ),
    # Reasoning Models (O-Series - Chat Completions)
    LLMModel(
        id="o3",
        provider=Provider.OPENAI,
        display_name="O3 (Complex Reasoning)",
        is_enabled=True,
        max_completion_tokens=100000,
        temperature=1.0,
        input_token_limit=200000,
        description="Reasoning model for complex tasks, succeeded by GPT-5 but still available for specific use cases",
    ),
    LLMModel(
        id="o3-pro",
        provider=Provider.OPENAI,
        display_name="O3 Pro (Enhanced Reasoning)",
        is_enabled=True,
        max_completion_tokens=100000,
        temperature=1.0,
        input_token_limit=200000,
        description="Version of O3 with more compute for better reasoning responses and complex problem analysis",
    ),
    LLMModel(
        id="o3-mini",
        provider=Provider.OPENAI,
        display_name="O3 Mini (Fast Reasoning)",
        is_enabled=True,
        max_completion_tokens=50000,
        temperature=1.0,
        input_token_limit=128000,
        description="Small model alternative to O3, faster and more cost-effective for reasoning tasks",
    ),
    LLMModel(
        id="o3-deep-research",
        provider=Provider.OPENAI,
        display_name="O3 Deep Research (Research)",
        is_enabled=True,
        max_completion_tokens=100000,
        temperature=1.0,
        input_token_limit=200000,
        description="Most advanced research model for deep, complex analysis of large datasets and documents",
    ),
    # GPT-4.1 Series (Chat Completions)
    LLMModel(
        id="gpt-4.1",
        provider=Provider.OPENAI,
        display_name="GPT-4.1 (Smartest Non-Reasoning)",
        is_enabled=True,
        max_completion_tokens=30000,
        temperature=1.0,
        input_token_limit=200000,
        description="Smartest non-reasoning model, excellent for general purpose tasks without reasoning overhead",
    ),
    LLMModel(
        id="gpt-4.1-mini",
        provider=Provider.OPENAI,
        display_name="GPT-4.1 Mini (Fast General)",
        is_enabled=True,
        max_completion_tokens=20000,
        temperature=1.0,
        input_token_limit=128000,
        description="Smaller, faster version of GPT-4.1 for focused general-purpose tasks",
    ),
    # GPT-4o Series (Chat Completions - Multimodal)
    LLMModel(
        id="gpt-4o",
        provider=Provider.OPENAI,
        display_name="GPT-4o (Omni - Fast & Intelligent)",
        is_enabled=True,
        default=True,
        max_completion_tokens=30000,
        temperature=1.0,
        input_token_limit=200000,
        description="Fast, intelligent, and flexible multimodal model with vision and audio capabilities",
    ),
    LLMModel(
        id="gpt-4o-mini",
        provider=Provider.OPENAI,
        display_name="GPT-4o Mini (Lightweight)",
        is_enabled=True,
        max_completion_tokens=20000,
        temperature=1.0,
        input_token_limit=200000,
        description="Fast and affordable small model for focused tasks, supports text and vision",
    ),
    # Previous Generation (Chat Completions)
    LLMModel(
        id="gpt-4-turbo",
        provider=Provider.OPENAI,
        display_name="GPT-4 Turbo (Previous Generation)",
        is_enabled=True,
        max_completion_tokens=20000,
        temperature=1.0,
        input_token_limit=128000,
        description="Older high-intelligence GPT-4 variant, still available for compatibility",
    ),
    LLMModel(
        id="gpt-3.5-turbo",
        provider=Provider.OPENAI,
        display_name="GPT-3.5 Turbo (Legacy)",
        is_enabled=True,
        max_completion_tokens=15000,
        temperature=1.0,
        input_token_limit=16385,
        description="Legacy GPT model for cheaper chat tasks, maintained for backward compatibility",
    ),

    # GOOGLE GEMINI MODELS (Latest as of December 2025)
    # Gemini 3 Series (Frontier Models)
    LLMModel(
        id="gemini-3-pro-preview",
        provider=Provider.GEMINI,
        display_name="Gemini 3 Pro (Most Intelligent)",
        is_enabled=True,
        api_version="v1beta",
        max_completion_tokens=100000,
        temperature=1.0,
        input_token_limit=1000000,
        description="Best model in the world for multimodal understanding with state-of-the-art reasoning and agentic capabilities",
    ),
    LLMModel(
        id="gemini-3-flash-preview",
        provider=Provider.GEMINI,
        display_name="Gemini 3 Flash (Frontier Speed)",
        is_enabled=True,
        api_version="v1beta",
        max_completion_tokens=100000,
        temperature=1.0,
        input_token_limit=1000000,
        description="Most intelligent model built for speed, combining frontier intelligence with superior search and grounding",
    ),
    # Gemini 2.5 Series (Advanced)
    LLMModel(
        id="gemini-2.5-pro",
        provider=Provider.GEMINI,
        display_name="Gemini 2.5 Pro (Advanced Reasoning)",
        is_enabled=True,
        api_version="v1beta",
        max_completion_tokens=100000,
        temperature=1.0,
        input_token_limit=1000000,
        description="State-of-the-art thinking model capable of reasoning over complex problems in code, math, and STEM",
    ),
    LLMModel(
        id="gemini-2.5-flash",
        provider=Provider.GEMINI,
        display_name="Gemini 2.5 Flash (Best Price-Performance)",
        is_enabled=True,
        api_version="v1beta",
        max_completion_tokens=100000,
        temperature=1.0,
        input_token_limit=1000000,
        description="Best model for price-performance with well-rounded capabilities, ideal for large-scale processing and agentic tasks",
    ),
    LLMModel(
        id="gemini-2.5-flash-lite",
        provider=Provider.GEMINI,
        display_name="Gemini 2.5 Flash-Lite (Ultra-Fast)",
        is_enabled=True,
        api_version="v1beta",
        max_completion_tokens=50000,
        temperature=1.0,
        input_token_limit=1000000,
        description="Fastest flash model optimized for cost-efficiency and high throughput on repetitive tasks",
    ),
    # Gemini 2.0 Series (Previous Workhorse)
    LLMModel(
        id="gemini-2.0-flash",
        provider=Provider.GEMINI,
        display_name="Gemini 2.0 Flash (Workhorse)",
        is_enabled=True,
        default=True,
        api_version="v1beta",
        max_completion_tokens=30000,
        temperature=1.0,
        input_token_limit=1000000,
        description="Second generation workhorse model with 1M token context window for large document processing",
    ),
    LLMModel(
        id="gemini-2.0-flash-lite",
        provider=Provider.GEMINI,
        display_name="Gemini 2.0 Flash-Lite (Previous Fast)",
        is_enabled=True,
        api_version="v1beta",
        max_completion_tokens=20000,
        temperature=1.0,
        input_token_limit=1000000,
        description="Second generation small workhorse model with 1M token context, lightweight version",
    ),

    # ANTHROPIC CLAUDE MODELS (Latest as of December 2025)
    # Claude 4.5 series are the world's best models for coding, agents, and computer use
    # All models support chat completion API

    # Claude 4.5 Series (Latest - State of the Art)
    LLMModel(
        id="claude-opus-4-5-20251101",
        provider=Provider.CLAUDE,
        display_name="Claude Opus 4.5 (Best in World)",
        is_enabled=True,
        max_completion_tokens=16384,
        temperature=1.0,
        input_token_limit=200000,
        description="World's best model for coding, agents, and computer use. State-of-the-art across all domains with 2x token efficiency",
    ),
    LLMModel(
        id="claude-sonnet-4-5",
        provider=Provider.CLAUDE,
        display_name="Claude Sonnet 4.5 (Frontier Intelligence)",
        is_enabled=True,
        max_completion_tokens=16384,
        temperature=1.0,
        input_token_limit=200000,
        description="Best coding model in the world. State-of-the-art on SWE-bench, strongest for complex agents, most aligned model",
    ),
    LLMModel(
        id="claude-haiku-4-5",
        provider=Provider.CLAUDE,
        display_name="Claude Haiku 4.5 (Fast Intelligence)",
        is_enabled=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=200000,
        description="State-of-the-art coding with unprecedented speed and cost-efficiency. Matches older frontier models at fraction of cost",
    ),

    # Claude 4 Series (Reliable Production)
    LLMModel(
        id="claude-sonnet-4",
        provider=Provider.CLAUDE,
        display_name="Claude Sonnet 4 (Production Workhorse)",
        is_enabled=True,
        default=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=200000,
        description="Reliable production model with frontier performance, improved coding over 3.7. Practical for most AI use cases and high-volume tasks",
    ),

    # Claude 3.5 Series (Production Ready)
    LLMModel(
        id="claude-3-5-sonnet-20241022",
        provider=Provider.CLAUDE,
        display_name="Claude 3.5 Sonnet v2 (Oct 2024)",
        is_enabled=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=200000,
        description="Previous generation flagship with excellent coding and reasoning, reliable for production use",
    ),
    LLMModel(
        id="claude-3-5-sonnet-20240620",
        provider=Provider.CLAUDE,
        display_name="Claude 3.5 Sonnet v1 (June 2024)",
        is_enabled=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=200000,
        description="First version of Claude 3.5 Sonnet, highly capable for most enterprise tasks",
    ),
    LLMModel(
        id="claude-3-5-haiku-20241022",
        provider=Provider.CLAUDE,
        display_name="Claude 3.5 Haiku (Fast)",
        is_enabled=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=200000,
        description="Fast and cost-effective 3.5 model for high-volume production tasks",
    ),

    # Claude 3 Series (Stable Legacy)
    LLMModel(
        id="claude-3-opus-20240229",
        provider=Provider.CLAUDE,
        display_name="Claude 3 Opus (Legacy Powerful)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=200000,
        description="Legacy Claude 3 model for complex tasks, superseded by 4.5 series",
    ),
    LLMModel(
        id="claude-3-sonnet-20240229",
        provider=Provider.CLAUDE,
        display_name="Claude 3 Sonnet (Legacy Balanced)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=200000,
        description="Legacy balanced model for standard workloads, superseded by 4.5 series",
    ),
    LLMModel(
        id="claude-3-haiku-20240307",
        provider=Provider.CLAUDE,
        display_name="Claude 3 Haiku (Legacy Fast)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=200000,
        description="Legacy fast model for simple tasks, superseded by Haiku 4.5",
    ),

    # OLLAMA MODELS (Open Source & Self-Hosted)
    # Popular models with millions of downloads from ollama.com/library

    # === REASONING MODELS ===
    # DeepSeek R1 Series (74.6M+ pulls) - State-of-the-art reasoning
    LLMModel(
        id="deepseek-r1:latest",
        provider=Provider.OLLAMA,
        display_name="DeepSeek R1 (Top Reasoning)",
        is_enabled=True,
        default=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=128000,
        description="State-of-the-art reasoning model rivaling GPT-4, excellent for complex problem-solving and analysis",
    ),
    LLMModel(
        id="deepseek-r1:70b",
        provider=Provider.OLLAMA,
        display_name="DeepSeek R1 70B (Powerful Reasoning)",
        is_enabled=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=128000,
        description="70B parameter reasoning model for demanding analytical tasks",
    ),
    LLMModel(
        id="deepseek-r1:8b",
        provider=Provider.OLLAMA,
        display_name="DeepSeek R1 8B (Fast Reasoning)",
        is_enabled=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=128000,
        description="Lightweight reasoning model running efficiently on consumer hardware",
    ),
    LLMModel(
        id="qwq:32b",
        provider=Provider.OLLAMA,
        display_name="QwQ 32B (Qwen Reasoning)",
        is_enabled=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=128000,
        description="Alibaba's reasoning model from Qwen series, 1.9M+ pulls, strong math and logic",
    ),

    # === META LLAMA FAMILY ===
    # Llama 3.1 Series (107.8M+ pulls) - Most popular
    LLMModel(
        id="llama3.1:latest",
        provider=Provider.OLLAMA,
        display_name="Llama 3.1 8B (Most Popular)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=128000,
        description="Most downloaded model on Ollama (107M+ pulls), excellent all-around performance",
    ),
    LLMModel(
        id="llama3.1:70b",
        provider=Provider.OLLAMA,
        display_name="Llama 3.1 70B (Flagship)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=128000,
        description="Meta's flagship model with best quality, competitive with GPT-4",
    ),
    LLMModel(
        id="llama3.1:405b",
        provider=Provider.OLLAMA,
        display_name="Llama 3.1 405B (Largest Open)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=128000,
        description="Largest open-source model, requires high-end hardware but exceptional quality",
    ),
    LLMModel(
        id="llama3.3:70b",
        provider=Provider.OLLAMA,
        display_name="Llama 3.3 70B (Latest Quality)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=128000,
        description="Newest Llama 3.3 with quality matching 405B model (2.8M+ pulls)",
    ),
    LLMModel(
        id="llama3.2:latest",
        provider=Provider.OLLAMA,
        display_name="Llama 3.2 (Lightweight)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=128000,
        description="Small 1B-3B models for edge devices and rapid inference (50M+ pulls)",
    ),

    # === QWEN FAMILY (ALIBABA) ===
    # Qwen 2.5 Series (18.3M+ pulls)
    LLMModel(
        id="qwen2.5-coder:latest",
        provider=Provider.OLLAMA,
        display_name="Qwen 2.5 Coder (Top Coding)",
        is_enabled=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=128000,
        description="Best open-source coding model (9.3M+ pulls), excels at code generation and debugging",
    ),
    LLMModel(
        id="qwen2.5:32b",
        provider=Provider.OLLAMA,
        display_name="Qwen 2.5 32B (Powerful General)",
        is_enabled=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=128000,
        description="32B general purpose with 128K context, excellent multilingual support",
    ),
    LLMModel(
        id="qwen2.5:72b",
        provider=Provider.OLLAMA,
        display_name="Qwen 2.5 72B (Flagship)",
        is_enabled=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=128000,
        description="Largest Qwen 2.5 model with best performance across all tasks",
    ),
    # Qwen 3 Series (15.4M+ pulls) - Latest
    LLMModel(
        id="qwen3:latest",
        provider=Provider.OLLAMA,
        display_name="Qwen 3 (Latest Generation)",
        is_enabled=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=128000,
        description="Latest Qwen with MoE architecture and improved reasoning capabilities",
    ),
    LLMModel(
        id="qwen3-coder:latest",
        provider=Provider.OLLAMA,
        display_name="Qwen 3 Coder (Latest Coding)",
        is_enabled=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=128000,
        description="Latest coding model from Qwen 3 series (1.4M+ pulls)",
    ),

    # === DEEPSEEK CODING ===
    LLMModel(
        id="deepseek-coder-v2:latest",
        provider=Provider.OLLAMA,
        display_name="DeepSeek Coder V2 (Strong Coding)",
        is_enabled=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=128000,
        description="GPT-4 level coding model with MoE architecture (1.3M+ pulls)",
    ),
    LLMModel(
        id="deepseek-v3:latest",
        provider=Provider.OLLAMA,
        display_name="DeepSeek V3 (MoE 671B)",
        is_enabled=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=128000,
        description="Massive MoE model with 671B parameters, 37B active (3M+ pulls)",
    ),

    # === GOOGLE GEMMA ===
    LLMModel(
        id="gemma3:latest",
        provider=Provider.OLLAMA,
        display_name="Gemma 3 (Google Latest)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=128000,
        description="Latest Google model with vision support (28.5M+ pulls)",
    ),
    LLMModel(
        id="gemma2:27b",
        provider=Provider.OLLAMA,
        display_name="Gemma 2 27B (Powerful)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=128000,
        description="Largest Gemma 2 model, excellent performance (11.6M+ pulls)",
    ),
    LLMModel(
        id="gemma2:9b",
        provider=Provider.OLLAMA,
        display_name="Gemma 2 9B (Balanced)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=128000,
        description="Balanced 9B model with good quality and speed",
    ),

    # === MISTRAL FAMILY ===
    LLMModel(
        id="mistral:latest",
        provider=Provider.OLLAMA,
        display_name="Mistral 7B (Efficient)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=32000,
        description="Fast and efficient 7B model (23.3M+ pulls), great balance of speed and quality",
    ),
    LLMModel(
        id="mistral-nemo:12b",
        provider=Provider.OLLAMA,
        display_name="Mistral Nemo 12B (128K Context)",
        is_enabled=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=128000,
        description="12B model with 128K context by Mistral + NVIDIA (3.1M+ pulls)",
    ),
    LLMModel(
        id="mistral-large:123b",
        provider=Provider.OLLAMA,
        display_name="Mistral Large 123B (Flagship)",
        is_enabled=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=128000,
        description="Mistral's flagship with 128K context, top-tier quality (299K+ pulls)",
    ),
    LLMModel(
        id="mixtral:8x7b",
        provider=Provider.OLLAMA,
        display_name="Mixtral 8x7B (MoE)",
        is_enabled=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=32000,
        description="Mixture of Experts model with 47B params, 13B active (1.5M+ pulls)",
    ),
    LLMModel(
        id="mixtral:8x22b",
        provider=Provider.OLLAMA,
        display_name="Mixtral 8x22B (Large MoE)",
        is_enabled=True,
        max_completion_tokens=8192,
        temperature=1.0,
        input_token_limit=64000,
        description="Larger MoE with 141B params, 39B active per token",
    ),

    # === PHI FAMILY (MICROSOFT) ===
    LLMModel(
        id="phi4:latest",
        provider=Provider.OLLAMA,
        display_name="Phi 4 14B (Microsoft Latest)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=16000,
        description="Microsoft's latest small model with strong reasoning (6.6M+ pulls)",
    ),
    LLMModel(
        id="phi3:14b",
        provider=Provider.OLLAMA,
        display_name="Phi 3 14B (Efficient)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=128000,
        description="Lightweight 14B model with excellent quality (15.2M+ pulls)",
    ),

    # === CODING SPECIALISTS ===
    LLMModel(
        id="codellama:latest",
        provider=Provider.OLLAMA,
        display_name="Code Llama 7B (Meta Coding)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=16000,
        description="Meta's specialized coding model, reliable and fast (3.7M+ pulls)",
    ),
    LLMModel(
        id="codellama:34b",
        provider=Provider.OLLAMA,
        display_name="Code Llama 34B (Powerful Coding)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=16000,
        description="Larger Code Llama for complex coding tasks",
    ),
    LLMModel(
        id="starcoder2:15b",
        provider=Provider.OLLAMA,
        display_name="StarCoder2 15B (Code Generation)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=16000,
        description="Open code generation model trained on 600+ languages (1.6M+ pulls)",
    ),
    LLMModel(
        id="granite-code:20b",
        provider=Provider.OLLAMA,
        display_name="Granite Code 20B (IBM Coding)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=8000,
        description="IBM's code intelligence model (397K+ pulls)",
    ),

    # === VISION MODELS ===
    LLMModel(
        id="llava:latest",
        provider=Provider.OLLAMA,
        display_name="LLaVA (Vision + Language)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=128000,
        description="Multimodal model combining vision and language (11.9M+ pulls)",
    ),
    LLMModel(
        id="llama3.2-vision:11b",
        provider=Provider.OLLAMA,
        display_name="Llama 3.2 Vision 11B (Image Reasoning)",
        is_enabled=True,
        max_completion_tokens=4096,
        temperature=1.0,
        input_token_limit=128000,
        description="Vision-enabled Llama for image understanding and reasoning (3.3M+ pulls)",
    ),
)
